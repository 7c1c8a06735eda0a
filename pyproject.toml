[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventcal"
version = "0.1.0"
description = "A small command-line calendar that records one-off and recurring events in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "events", "scheduling", "recurrence", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eventcal = "eventcal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eventcal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
