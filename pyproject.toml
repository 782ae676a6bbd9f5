[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdbkit"
version = "0.1.0"
description = "Building blocks for a small relational database: an AVL tree, chained hash tables, a bit-filtered tracer and SQL token enums"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "hashtable", "tracer", "sql", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdbkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
