[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mikroc"
version = "0.1.0"
description = "Lexer, syntax-tree builder and tree-walking interpreter for a small C-like language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "lexer", "c-like", "toy language", "syntax tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mikroc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
