[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainpuzzle"
version = "1.0.0"
description = "A terminal puzzle game: grow chains across numbered grids, climbing from low to high."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "terminal", "grid", "chain"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainpuzzle = "chainpuzzle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chainpuzzle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
