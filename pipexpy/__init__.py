"""Run two commands connected by a pipe, with file input and file output."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "textops",
    "linkedlist",
    "output",
    "linereader",
    "pathfind",
    "pipeline",
]