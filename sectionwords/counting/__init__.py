"""
Word counting over extracted text blocks
"""

from .word_counter import WordCounter, count_words, normalize_exclusions

__all__ = [
    'WordCounter',
    'count_words',
    'normalize_exclusions'
]
