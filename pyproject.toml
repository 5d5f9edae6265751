[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gonzocasino"
version = "0.1.0"
description = "A small console casino with four games played for gonzos"
requires-python = ">=3.10"
dependencies = []
keywords = ["casino", "console", "game", "slots", "rock-paper-scissors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gonzocasino = "gonzocasino.view:main"

[tool.hatch.build.targets.wheel]
packages = ["gonzocasino"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
