import io
from unittest import mock

from vehiclesim.cli import main


def run_cli(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_exit_immediately(monkeypatch, capsys):
    code, out = run_cli(monkeypatch, capsys, "0\n")
    assert code == 0
    assert "=== Vehicle Simulation Menu ===" in out
    assert out.endswith("Exiting program...\n")


def test_end_of_input_exits(monkeypatch, capsys):
    code, out = run_cli(monkeypatch, capsys, "")
    assert code == 0
    assert out.endswith("Exiting program...\n")


def test_add_and_view_vehicle(monkeypatch, capsys):
    code, out = run_cli(monkeypatch, capsys, "1\n7\n0\n0\n20\n90\n5\n2\n0\n")
    assert code == 0
    assert "Speed (m/s): " in out
    assert "Vehicle added successfully." in out
    assert "ID: 7 Pos(0,0) Speed: 20 Dir: 90 Len: 5\n" in out


def test_view_vehicles_when_empty(monkeypatch, capsys):
    _, out = run_cli(monkeypatch, capsys, "2\n0\n")
    assert "No vehicles available.\n" in out


def test_invalid_vehicle_field(monkeypatch, capsys):
    _, out = run_cli(monkeypatch, capsys, "1\nabc\n2\n0\n")
    assert "Invalid input.\n" in out
    assert "Vehicle added successfully." not in out
    assert "No vehicles available.\n" in out


def test_start_needs_two_vehicles(monkeypatch, capsys):
    _, out = run_cli(monkeypatch, capsys, "3\n0\n")
    assert "Need at least 2 vehicles to start simulation.\n" in out


def test_replay_unknown_run(monkeypatch, capsys):
    _, out = run_cli(monkeypatch, capsys, "5\n3\n0\n")
    assert "Run ID not found.\n" in out


def test_history_when_empty(monkeypatch, capsys):
    _, out = run_cli(monkeypatch, capsys, "4\n0\n")
    assert "No past runs.\n" in out


@mock.patch("time.sleep")
def test_full_session(sleep, monkeypatch, capsys):
    script = (
        "1\n1\n0\n0\n1\n0\n2\n"
        "1\n2 100 100 0 0 2\n"
        "3\n4\n5\n1\n0\n"
    )
    code, out = run_cli(monkeypatch, capsys, script)
    assert code == 0
    assert out.count("Vehicle added successfully.") == 2
    assert "Simulation started..." in out
    assert "Max simulation time reached. Stopping." in out
    assert "Simulation ended. Status: Stopped\n" in out
    assert "Run ID: 1 Steps: 5 Status: Stopped\n" in out
    assert "=== Replay of Run 1 ===" in out
    assert sleep.call_count == 5
    sleep.assert_called_with(1.0)