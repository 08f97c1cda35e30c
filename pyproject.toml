[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termrewrite"
version = "0.1.0"
description = "A small term rewriting engine with a ready-made set of boolean rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["term rewriting", "rewrite rules", "normal form", "boolean logic", "symbolic"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termrewrite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
