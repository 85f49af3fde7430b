[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonutils"
version = "0.1.0"
description = "JSON value helpers: canonical serialisation, query strings, YAML conversion and typed scalar conversion"
requires-python = ">=3.10"
keywords = ["json", "querystring", "yaml", "serialization", "conversion"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jsonutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
