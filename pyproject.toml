[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metroroute"
version = "0.1.0"
description = "Metro route finder: least stops, least cost and least time routes over a CSV-defined metro network"
requires-python = ">=3.10"
dependencies = []
keywords = ["metro", "transit", "routing", "dijkstra", "bfs", "shortest-path"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metroroute = "metroroute.app:main"

[tool.hatch.build.targets.wheel]
packages = ["metroroute"]

[tool.pytest.ini_options]
addopts = "-ra"
