[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Small data-structure and algorithm exercises: list vs. BST search counts, a backtracking SAT solver, a game state stack and Huffman compression."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "sat", "huffman", "binary-search-tree", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-compare = "algolab.comparison:main"
algolab-sat = "algolab.sat:main"
algolab-states = "algolab.game_states:main"
algolab-huffman = "algolab.huffman:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
