[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem"
version = "0.1.0"
description = "Texas Hold'em cards, players, hand ranking, betting state and a static file server for a browser front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas holdem", "cards", "game", "hand evaluation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
holdem-server = "holdem.server:main"

[tool.hatch.build.targets.wheel]
packages = ["holdem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
