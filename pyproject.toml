[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "theboys"
version = "0.1.0"
description = "Discrete-event simulation of heroes, bases and missions"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "priority-queue", "heroes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
theboys = "theboys.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["theboys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
