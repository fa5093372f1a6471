[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpoker"
version = "0.1.0"
description = "Deal a five-card poker hand from a shuffled deck and name what it makes"
requires-python = ">=3.10"
keywords = ["poker", "cards", "deck", "hand evaluation", "game"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpoker = "cpoker.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cpoker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
