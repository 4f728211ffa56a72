[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidearcade"
version = "0.1.0"
description = "Terminal sliding-tile puzzle and a small menu-driven music player"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["puzzle", "sliding puzzle", "15 puzzle", "music player", "terminal game"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slide-puzzle = "slidearcade.puzzle_game:main"
slidearcade-player = "slidearcade.player:main"

[tool.hatch.build.targets.wheel]
packages = ["slidearcade"]

[tool.pytest.ini_options]
addopts = "-ra"
