import re
from typing import Dict, Iterable, Set

# ASCII letters only; digits, punctuation and accented letters separate words
WORD_PATTERN = re.compile(r'[a-zA-Z]+')


def normalize_exclusions(words: Iterable[str]) -> Set[str]:
    """Trim and lowercase each excluded word.

    An empty token (blank input split on commas) is kept; it never matches a word.
    """
    return {word.strip().lower() for word in words}


class WordCounter:
    """Counts lowercase ASCII words, skipping a stoplist"""

    def __init__(self, exclude: Iterable[str] = ()):
        self.exclude = normalize_exclusions(exclude)

    def tokenize(self, text: str):
        for match in WORD_PATTERN.finditer(text):
            yield match.group().lower()

    def count(self, text_blocks: Iterable[str]) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for text in text_blocks:
            for word in self.tokenize(text):
                if word in self.exclude:
                    continue
                counts[word] = counts.get(word, 0) + 1
        return counts


def count_words(text_blocks: Iterable[str], exclude: Iterable[str] = ()) -> Dict[str, int]:
    """Map each word in `text_blocks` to its number of occurrences"""
    return WordCounter(exclude).count(text_blocks)
