[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numcraft"
version = "0.1.0"
description = "Small arithmetic, number-base, finance, geometry, text and pattern utilities with interactive menus"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gcd",
    "lcm",
    "factorial",
    "primes",
    "number bases",
    "matrices",
    "unit conversion",
    "patterns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numcraft = "numcraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
