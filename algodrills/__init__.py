"""Classic algorithm exercises on linked lists, trees, stacks, arrays and dynamic programming."""

__version__ = "0.1.0"