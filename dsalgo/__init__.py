"""Classic algorithms and data structures: arrays, numbers, recursion, dynamic
programming, strings, expressions, graphs, spanning trees, backtracking,
binary trees, AVL and search trees, and linked lists."""

__version__ = "0.1.0"