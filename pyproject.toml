[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starfield"
version = "0.1.0"
description = "Game logic for 2D arcade games: world, collisions, scoring, sprites, shapes, timers and input routing"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "arcade", "collision", "quaternion", "sprite"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
