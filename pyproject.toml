[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgos"
version = "0.1.0"
description = "Classic graph, greedy and dynamic-programming algorithms with a small command-line front end"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "kruskal",
    "prim",
    "minimum spanning tree",
    "job scheduling",
    "matrix chain multiplication",
    "n-queens",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphalgos = "graphalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
