[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdesmodes"
version = "0.1.0"
description = "Simplified DES block cipher with ECB and CBC modes of operation over bit strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["sdes", "des", "block cipher", "ecb", "cbc", "cryptography", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sdesmodes = "sdesmodes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sdesmodes"]

[tool.pytest.ini_options]
addopts = "-ra"
