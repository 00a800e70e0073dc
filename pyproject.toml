[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numgeo"
version = "0.1.0"
description = "Bisection root finding, minimum enclosing circles and point-in-polygon tests"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bisection",
    "root finding",
    "computational geometry",
    "welzl",
    "minimum enclosing circle",
    "point in polygon",
    "xoroshiro128plus",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
numgeo-bisection = "numgeo.bisection:main"
numgeo-mec = "numgeo.welzl:main"
numgeo-pip = "numgeo.polygon:main"

[tool.hatch.build.targets.wheel]
packages = ["numgeo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
