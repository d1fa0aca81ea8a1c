[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coupgame"
version = "0.1.0"
description = "A turn-based Coup game engine with role abilities, a scripted demo and a graphical table"
requires-python = ">=3.10"
keywords = ["coup", "board game", "card game", "turn-based", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
coup-demo = "coupgame.demo:main"
coup-game = "coupgame.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["coupgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
