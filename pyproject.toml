[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "realrpg"
version = "0.1.0"
description = "A small turn-based text RPG played with single key presses in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "text-game", "terminal", "dungeon", "turn-based"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
realrpg = "realrpg.game:main"

[tool.hatch.build.targets.wheel]
packages = ["realrpg"]

[tool.pytest.ini_options]
addopts = "-ra"
