[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethcodec"
version = "0.1.0"
description = "Lightweight RLP and SSZ encoding and decoding for Ethereum data"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethereum", "rlp", "ssz", "serialization", "encoding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ethcodec = "ethcodec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ethcodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
