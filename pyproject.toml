[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tintsandtells"
version = "1.0.0"
description = "A two-guesser colour clue game played in the terminal on a board of hues and shades"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board game", "colour", "party game", "guessing game", "hot seat", "terminal"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tintsandtells = "tintsandtells.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tintsandtells"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
