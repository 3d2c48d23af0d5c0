[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdlcompiler"
version = "0.1.0"
description = "A small compiler that turns CDL programs into JavaScript"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "javascript", "code generation", "education"]
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
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cdlc = "cdlcompiler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cdlcompiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
