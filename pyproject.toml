[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "open_fortress"
version = "0.1.0"
description = "Simulation core of a colony-building game: chunked world map, digging, pathfinding, work orders and plant growth"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "colony", "pathfinding", "procedural-generation", "tilemap"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["open_fortress"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
