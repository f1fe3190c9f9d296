[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bellparams"
version = "0.1.0"
description = "Find the block size and Blocked-ELL arrays that best compress a sparse square matrix"
requires-python = ">=3.10"
keywords = ["sparse", "blocked-ell", "ellpack", "matrix", "block size"]
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
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
find-bell-params = "bellparams.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bellparams"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
