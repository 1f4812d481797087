[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iso6709parse"
version = "0.1.1"
description = "Parses coordinates in ISO 6709 format from strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["iso6709", "latlon", "coordinates", "parse", "gps"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iso6709parse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
