[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dkits"
version = "0.1.0"
description = "Everyday development kits: string and byte helpers, small containers, property files, hashing, AES, text encodings and system helpers."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "utilities",
    "strings",
    "bytes",
    "containers",
    "properties",
    "aes",
    "hashing",
    "base64",
    "base32",
    "ascii85",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dkits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
