[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kssh"
version = "0.1.0"
description = "Building blocks of a small POSIX-style shell: lexer, syntax checks, environment, command lookup and redirections"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "syntax", "pipeline", "redirection", "environment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kssh"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
