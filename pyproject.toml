[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kitrack"
version = "0.1.0"
description = "Track-finding building blocks: hits, segments, connection criteria and greedy best-subset selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["tracking", "particle physics", "track reconstruction", "segments", "criteria"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kitrack"]

[tool.pytest.ini_options]
addopts = "-ra"
