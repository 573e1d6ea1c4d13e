[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreaker"
version = "1.0.0"
description = "A small brick-breaking arcade game with levels, power-ups and a persistent scoreboard"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "breakout", "bricks", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brickbreaker = "brickbreaker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["brickbreaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
