# src/reverser/textutils/__init__.py
"""
Text helpers for word splitting, letter detection and sample loading.
"""

from .text_utils import is_ascii_letter, split_words, join_words, letters_of
from .sample_loader import load_samples

__all__ = [
    "is_ascii_letter",
    "split_words",
    "join_words",
    "letters_of",
    "load_samples",
]

__version__ = "0.1.0"
