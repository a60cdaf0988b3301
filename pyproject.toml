[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aesblock"
version = "0.1.0"
description = "AES-128 block cipher in byte-oriented and table-driven 32-bit forms"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "aes-128", "rijndael", "block cipher", "cryptography", "t-tables", "gf256"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
aesblock = "aesblock.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aesblock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
