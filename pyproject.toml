[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sceneobjects"
version = "0.1.0"
description = "Load, edit and save a scene of named, coloured objects stored as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "scene", "objects", "colors", "observer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sceneobjects"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
