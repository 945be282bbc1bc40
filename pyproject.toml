[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitweave"
version = "0.1.0"
description = "Bit-level reading and writing of integers, flags, IP addresses, nul-terminated strings and containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bits", "binary", "serialization", "deserialization", "parsing", "endian"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitweave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
