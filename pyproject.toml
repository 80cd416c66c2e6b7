[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golfcourse"
version = "0.1.0"
description = "Hole generators, catalogues and golfer bookkeeping for a code golf site"
requires-python = ">=3.11"
keywords = ["code-golf", "puzzles", "generators", "holes", "sudoku", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["golfcourse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
