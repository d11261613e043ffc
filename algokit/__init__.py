"""Classic data structures and algorithms: trees, heaps, queues, stacks,
dynamic programming, recursion and string problems."""

__version__ = "0.1.0"