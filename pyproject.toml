[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amazed"
version = "0.1.0"
description = "Route a crowd of robots through an anthill-style maze of rooms and tunnels"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "graph", "pathfinding", "robots", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
amazed = "amazed.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["amazed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
