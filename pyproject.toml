[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argwright"
version = "2.0.2"
description = "Building blocks for a strongly typed command line argument parser: argument definitions, value conversion and error messages."
requires-python = ">=3.10"
dependencies = []
keywords = ["command line", "arguments", "parser", "cli", "options"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argwright"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
