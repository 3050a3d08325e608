"""Classic data structures and algorithms: a bounded min-heap, an AVL tree, a stack, string sorters, classroom scheduling and Fibonacci numbers."""

__version__ = "0.1.0"