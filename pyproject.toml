[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "debouncefsm"
version = "0.1.0"
description = "Button debounce state machine with non-blocking delays and a pluggable GPIO layer"
requires-python = ">=3.10"
dependencies = []
keywords = ["debounce", "button", "fsm", "state-machine", "gpio", "embedded", "delay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["debouncefsm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
