[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atframe"
version = "0.1.0"
description = "Toolkit-independent UI helpers: markdown and ANSI parsing, text wrapping, mouse interaction state and directory trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "ansi", "text-wrapping", "ui", "mouse", "directory-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
