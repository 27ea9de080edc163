[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heistgrid"
version = "1.0.0"
description = "A tile-based heist puzzle: collect all the loot, dodge the patrolling guards and reach the exit."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile", "grid", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
heistgrid = "heistgrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["heistgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
