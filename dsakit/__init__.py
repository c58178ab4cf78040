"""Classic data structures and algorithms: sorting, searching, patterns,
stacks, queues, heaps, hash tables, linked lists, tries, greedy methods,
graph traversal, shortest paths and minimum spanning trees."""

__version__ = "0.1.0"