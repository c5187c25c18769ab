[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "energytrade"
version = "0.1.0"
description = "In-memory ledger for energy trades between buyers and sellers, indexed with B+ trees and saved as CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["energy", "trading", "ledger", "b+tree", "transactions", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
energytrade = "energytrade.cli:main"

[tool.setuptools.packages.find]
include = ["energytrade*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
