[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minijuegos"
version = "0.1.0"
description = "Small console games (tic-tac-toe, match-three, naval battle), a process scheduler and classic container types"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "games",
    "console",
    "tic-tac-toe",
    "battleship",
    "match-three",
    "linked-list",
    "stack",
    "queue",
    "priority-queue",
    "scheduler",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minijuegos-triqui = "minijuegos.tictactoe:main"
minijuegos-candy = "minijuegos.candy:main"
minijuegos-batalla = "minijuegos.battleship:main"
minijuegos-planificador = "minijuegos.scheduler:main"

[tool.hatch.build.targets.wheel]
packages = ["minijuegos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
