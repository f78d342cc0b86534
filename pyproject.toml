[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leafstack"
version = "0.1.0"
description = "A letter-elimination game played with AVL trees and stacks of their leaves"
requires-python = ">=3.10"
keywords = ["avl", "tree", "stack", "game", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leafstack = "leafstack.game:main"

[tool.hatch.build.targets.wheel]
packages = ["leafstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
