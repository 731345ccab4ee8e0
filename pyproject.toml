[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triquigo"
version = "1.0.0"
description = "Tic-tac-toe (triqui) board logic with traditional and synchronized game modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "triqui", "board game", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["triquigo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
