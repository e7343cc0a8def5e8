[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilerunner"
version = "0.1.0"
description = "Building blocks for a tile-based side-scrolling platformer: tile maps, collision boxes, a player, a chasing enemy, items and four stages."
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "tiles", "side-scroller", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tilerunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
