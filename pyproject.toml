[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csweeper"
version = "1.0.0"
description = "A terminal Minesweeper game with keyboard controls, difficulty templates and custom boards"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "terminal", "puzzle", "ansi"]
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
csweeper = "csweeper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["csweeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
