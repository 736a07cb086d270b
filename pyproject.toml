[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsemat"
version = "0.1.0"
description = "Triplet and compressed sparse matrices, sparse iteration helpers and double stacks in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "matrix", "csr", "csc", "triplet", "coordinate format", "linear algebra"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sparsemat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
