"""Classic data-structure and algorithm exercises: searching, recursion, arrays,
dynamic programming, strings, linked lists, binary trees, graphs and a bounded stack."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dynamic",
    "graph",
    "linkedlist",
    "matrix",
    "recursion",
    "searching",
    "stack",
    "strings",
    "trees",
]