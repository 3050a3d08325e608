[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csalgos"
version = "0.1.0"
description = "Classic data structures and algorithms: a bounded min-heap, an AVL tree, a stack, string sorters, classroom scheduling and Fibonacci numbers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "avl-tree",
    "heap",
    "sorting",
    "stack",
    "interval-scheduling",
    "fibonacci",
    "dynamic-programming",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csalgos-sort = "csalgos.sorters:main"
csalgos-args = "csalgos.arguments:main"
csalgos-avl = "csalgos.avl:main"
csalgos-classrooms = "csalgos.intervals:main"
csalgos-stack = "csalgos.stack:main"
csalgos-fib = "csalgos.fibonacci:main"

[tool.hatch.build.targets.wheel]
packages = ["csalgos"]

[tool.hatch.build.targets.sdist]
include = ["csalgos", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
