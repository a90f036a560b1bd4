[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rotnsave"
version = "0.1.0"
description = "Terminal editor for Rift Of The Necrodancer save game files"
requires-python = ">=3.10"
keywords = ["save editor", "savegame", "json", "rhythm game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rotnsave = "rotnsave.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rotnsave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
