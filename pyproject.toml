[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonnetkit"
version = "0.1.0"
description = "Building blocks for a Jsonnet interpreter: AST nodes, source locations, fodder, standard-library builtins and command-line helpers."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["jsonnet", "json", "yaml", "configuration", "interpreter", "ast"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jsonnetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
