[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "portalchess"
version = "0.1.0"
description = "Chess variant configurations with custom pieces and portals: JSON loading, validation and board display"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "portals", "custom pieces", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
portalchess = "portalchess.cli:main"

[tool.setuptools.packages.find]
include = ["portalchess*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
