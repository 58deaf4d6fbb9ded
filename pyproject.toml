[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and graph algorithms: search trees, heaps, B-trees, maze search, shortest paths and spanning trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "avl",
    "aa-tree",
    "red-black-tree",
    "splay-tree",
    "b-tree",
    "heap",
    "dijkstra",
    "kruskal",
    "prim",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-aa = "dsakit.aa:main"
dsakit-avl = "dsakit.avl:main"
dsakit-bst = "dsakit.bst:main"
dsakit-splay = "dsakit.splay:main"
dsakit-heap = "dsakit.heap:main"
dsakit-btree = "dsakit.btree:main"
dsakit-redblack = "dsakit.redblack:main"
dsakit-maze = "dsakit.maze:main"
dsakit-dijkstra = "dsakit.dijkstra:main"
dsakit-kruskal = "dsakit.kruskal:main"
dsakit-prims = "dsakit.prims:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

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
