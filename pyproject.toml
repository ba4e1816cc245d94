[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlot"
version = "0.1.0"
description = "A small tokenizer for a subset of YAML block syntax"
requires-python = ">=3.10"
dependencies = []
keywords = ["yaml", "tokenizer", "lexer", "indentation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yamlot-tokenizer = "yamlot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yamlot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
