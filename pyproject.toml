[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "idxlist"
version = "0.1.0"
description = "Singly and doubly linked lists with constant-time index handles, slices and node moves"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "data structures", "index", "slice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["idxlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
