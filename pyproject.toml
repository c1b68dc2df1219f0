[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rowstore"
version = "0.1.0"
description = "A small in-memory paged row store for student records, with an interactive console."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "row store", "pages", "bitmap", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rowstore = "rowstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rowstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
