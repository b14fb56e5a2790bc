[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termvaders"
version = "0.1.0"
description = "A small Space Invaders style shooter that runs in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "space-invaders", "arcade", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
termvaders = "termvaders.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termvaders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
