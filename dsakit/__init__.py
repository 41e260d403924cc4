"""Classic data structures and algorithms: arrays, sorting, stacks, queues, expressions, graphs and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "binary_tree",
    "bst",
    "expressions",
    "graphs",
    "guessing",
    "queues",
    "sorting",
    "stack_menu",
    "stacks",
]