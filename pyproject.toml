[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "braincli"
version = "0.1.0"
description = "Command-line tool for working through a YAML task graph: list next tasks, print context, verify, conclude and reflect"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["tasks", "task-graph", "cli", "yaml", "workflow", "verification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brain = "braincli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["braincli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
