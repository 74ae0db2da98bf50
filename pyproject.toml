[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "durak"
version = "0.1.0"
description = "The Durak card game: cards, deck, players, a turn state machine, a game controller and a console game"
requires-python = ">=3.10"
dependencies = []
keywords = ["durak", "cards", "card-game", "game", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
durak = "durak.app:main"

[tool.hatch.build.targets.wheel]
packages = ["durak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
