[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libob"
version = "0.1.0"
description = "Building blocks for limit order book simulation: orders, order events, trades and supporting utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "limit order", "market order", "trading", "order events", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libob"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
