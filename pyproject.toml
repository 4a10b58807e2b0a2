[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vehiclesim"
version = "0.1.0"
description = "Interactive 2D vehicle motion simulation with collision detection, run history and replay"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "vehicles", "collision", "kinematics", "replay"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vehiclesim = "vehiclesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vehiclesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
