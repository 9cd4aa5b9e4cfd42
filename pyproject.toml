[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indexedfile"
version = "0.1.0"
description = "An in-memory indexed sequential file with a blocked primary area, an overflow area and a block index"
requires-python = ">=3.10"
dependencies = []
keywords = ["indexed sequential", "isam", "file organisation", "overflow", "index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
indexedfile = "indexedfile.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["indexedfile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
