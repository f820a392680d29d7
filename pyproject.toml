[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctbigint"
version = "0.1.0"
description = "Fixed-width big unsigned integers with wrapping, checked and Montgomery modular arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "montgomery", "modular-arithmetic", "cryptography", "fixed-width"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ctbigint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
