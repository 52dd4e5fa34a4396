[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilkit"
version = "0.1.0"
description = "Everyday helpers for sequences, formatting, JSON, command lines, environment variables and chained errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "helpers", "json", "cli", "command-line", "environment", "errors"]
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
packages = ["utilkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
