[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robingraph"
version = "1.2.3"
description = "Robust outlier rejection based on measurement compatibility graphs"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "outlier rejection",
    "compatibility graph",
    "k-core",
    "maximum clique",
    "graph",
    "matrix market",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["robingraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
