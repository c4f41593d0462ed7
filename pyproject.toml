[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfweave"
version = "0.1.0"
description = "Building blocks for writing PDF files: object model and encoding, graphics state, functions, metadata and standard security values"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "document", "writer", "rc4", "graphics-state"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfweave"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
