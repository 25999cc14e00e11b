[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baloncesto"
version = "0.1.0"
description = "Interactive console manager for basketball teams and players stored in JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = ["basketball", "teams", "players", "json", "crud", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
baloncesto = "baloncesto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["baloncesto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
