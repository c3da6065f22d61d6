[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadnet"
version = "0.1.0"
description = "Road network model with logical addressing, coordinate frames and SQLite loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["road network", "logical address", "junction", "link", "sqlite"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roadnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
