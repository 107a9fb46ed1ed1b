"""Building blocks for a Jsonnet interpreter: AST, locations, fodder, builtins and CLI helpers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "cli_args",
    "clone",
    "fodder",
    "identifiers",
    "location",
    "manifest",
    "nodes",
    "operators",
    "strings",
    "values",
]