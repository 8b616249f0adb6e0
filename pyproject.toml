[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "farsapy"
version = "0.1.0"
description = "Typed solver options, sparse coordinate-list matrices and test problems for smooth optimization"
requires-python = ">=3.10"
dependencies = []
keywords = ["optimization", "options", "sparse matrix", "quadratic", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["farsapy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
