[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubegenetic"
version = "0.1.0"
description = "A 3x3 Rubik's cube model with a genetic-algorithm solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "genetic-algorithm", "solver"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubegenetic = "cubegenetic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubegenetic"]

[tool.pytest.ini_options]
addopts = "-ra"
