[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ahorcado"
version = "1.0.0"
description = "Terminal hangman game played with a gamepad"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["hangman", "ahorcado", "game", "gamepad", "terminal"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ahorcado = "ahorcado.app:main"
ahorcado-categorias = "ahorcado.categories:main"

[tool.hatch.build.targets.wheel]
packages = ["ahorcado"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
