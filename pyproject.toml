[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawn_defense"
version = "0.1.0"
description = "Game model and 2D mesh geometry for a lane-based defence game: grid, plants, projectiles, suns and scene setup"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defense", "2d", "mesh", "geometry"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lawn_defense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
