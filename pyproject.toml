[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solvers for a collection of competitive programming problems, usable as functions or as stdin/stdout commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "combinatorics", "puzzles"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestkit-round1029 = "contestkit.round1029:main"
contestkit-round1030 = "contestkit.round1030:main"
contestkit-round1031 = "contestkit.round1031:main"
contestkit-round1032 = "contestkit.round1032:main"
contestkit-rook-tours = "contestkit.rook_tours:main"
contestkit-elevator = "contestkit.elevator:main"
contestkit-tree-colorings = "contestkit.tree_colorings:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
