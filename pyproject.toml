[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "graphalgos"
version = "0.1.0"
description = "Classic graph algorithms, disjoint sets, searching and ordering utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "shortest-path",
    "minimum-spanning-tree",
    "disjoint-set",
    "strongly-connected-components",
    "topological-sort",
    "tsp",
    "flood-fill",
    "binary-search",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphalgos-words = "graphalgos.words:main"

[tool.setuptools.packages.find]
include = ["graphalgos*"]

[tool.pytest.ini_options]
addopts = "-ra"
