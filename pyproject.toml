[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecosim"
version = "0.1.0"
description = "A small predator-prey ecosystem simulation with weather-driven resource generation"
requires-python = ">=3.10"
keywords = ["simulation", "ecosystem", "game", "pygame", "predator-prey"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecosim = "ecosim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ecosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
