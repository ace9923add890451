"""Classic data structures and algorithms: arrays, patterns, sorting, heaps,
hashing, recursion, linked lists, trees, stacks, expressions, queues, graphs
and backtracking."""

__version__ = "0.1.0"