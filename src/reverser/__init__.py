# src/reverser/__init__.py

from .core import reverse, reverse_word

__all__ = [
    "reverse",
    "reverse_word",
]
