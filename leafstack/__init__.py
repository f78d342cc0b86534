"""A letter-elimination game played with AVL trees and stacks of their leaves."""

__version__ = "0.1.0"
__all__ = ["letters", "stack", "avl", "game"]