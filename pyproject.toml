[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegame"
version = "0.1.0"
description = "A terminal snake game with JSON level cards, a level editor and per-level high-score tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "arcade", "terminal", "curses", "level-editor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakegame = "snakegame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snakegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
