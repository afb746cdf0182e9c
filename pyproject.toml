[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turbine"
version = "0.1.0"
description = "Building blocks of a small statically typed scripting language: format specifiers, syntax trees, constant folding, slot maps and native modules"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "language", "syntax-tree", "constant-folding"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["turbine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
