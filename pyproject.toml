[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessgame"
version = "1.0.0"
description = "Two-player chess engine that validates moves and answers a graphics front end over a named pipe"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "move validation", "checkmate", "named pipe"]
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
chessgame = "chessgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chessgame"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
