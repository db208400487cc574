[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsdemos"
version = "0.1.0"
description = "Data structure demonstrations: an airport runway queue simulation, Huffman coding, and classic sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "queue", "simulation", "huffman", "sorting", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdemos-airport = "dsdemos.airport:main"
dsdemos-huffman = "dsdemos.huffman:main"
dsdemos-sort = "dsdemos.sortdemo:main"

[tool.setuptools.packages.find]
include = ["dsdemos*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
