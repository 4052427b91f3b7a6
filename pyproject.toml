[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazeman"
version = "0.1.0"
description = "A small maze-chase game whose walls are laid out by a grid of sensors fitting L, T, plus and I pieces."
requires-python = ">=3.10"
keywords = ["game", "maze", "arcade", "pygame", "procedural"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazeman = "mazeman.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mazeman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
