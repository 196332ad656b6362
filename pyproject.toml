[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alfy"
version = "1.5.0"
description = "Sequence, interval and statistics primitives for alignment-free local homology detection between a query and subject genomes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "genomics",
    "shustring",
    "shulen",
    "fasta",
    "homology",
    "alignment-free",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alfy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
