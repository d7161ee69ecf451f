[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abonements"
version = "0.1.0"
description = "Keep a list of club memberships (name, tier, expiry date) in a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["membership", "subscription", "csv", "club"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
abonements = "abonements.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["abonements"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
