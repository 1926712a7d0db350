[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lowengine"
version = "0.1.0"
description = "A small entity-component-system game engine core: scenes, entities, component pools and input actions."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "ecs", "entity-component-system", "scene", "input"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lowengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
