[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "islandsim"
version = "0.1.0"
description = "Tick-driven island simulation core: event queue, input collection, replay, scene, physics world and lighting state"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "event-queue", "fixed-timestep", "physics", "replay"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
islandsim = "islandsim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["islandsim"]

[tool.pytest.ini_options]
addopts = "-ra"
