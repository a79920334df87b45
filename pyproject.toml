[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loxlex"
version = "0.1.0"
description = "A tokenizer for the Lox scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "lexer", "scanner", "tokenizer", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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

[project.scripts]
loxlex = "loxlex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loxlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
