[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levaffinity"
version = "0.1.0"
description = "Levenshtein edit distance and affinity scoring for strings, with threaded batch matching and a command line tool."
requires-python = ">=3.10"
dependencies = []
keywords = ["levenshtein", "edit distance", "fuzzy matching", "string similarity", "affinity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
levaffinity = "levaffinity.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["levaffinity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
