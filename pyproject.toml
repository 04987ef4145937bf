[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnmo"
version = "0.1.0"
description = "Building blocks for a terminal game console: game list, queue, history, scoreboards, save files and mini-games."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "console", "terminal", "hangman", "snake", "tower of hanoi", "scoreboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bnmo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
