[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpgraph"
version = "0.1.0"
description = "Classic dynamic-programming and graph algorithms over plain Python data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "graph",
    "algorithms",
    "knapsack",
    "subset sum",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "union-find",
    "topological sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dpgraph"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
