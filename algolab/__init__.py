"""Classic data structures, sorting algorithms and graph algorithms."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "bucketsort",
    "cli",
    "cmpsort",
    "components",
    "cycles",
    "fifo",
    "graph",
    "graphio",
    "hashing",
    "intsort",
    "linkedlist",
    "paths",
    "sortcheck",
    "spanning",
    "stack",
    "traversal",
]