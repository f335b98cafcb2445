[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textpack"
version = "0.1.0"
description = "Compress text to a small binary file with Huffman coding or LZ77, and read it back."
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "lz77", "compression", "encoding", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textpack = "textpack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["textpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
