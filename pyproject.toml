[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colorout"
version = "6.6.3"
description = "Colored terminal output through functions and builders, with custom text and background colors."
requires-python = ">=3.10"
dependencies = []
keywords = ["output", "console", "log", "print", "color", "ansi"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["colorout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
