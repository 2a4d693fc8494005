"""
Report - Ranking and console table for word counts
"""

from typing import Dict, List, Tuple

WORD_COLUMN_WIDTH = 15
TABLE_HEADER = "Word\t\t# of Occurrences"


def top_words(counts: Dict[str, int], n: int) -> List[Tuple[str, int]]:
    """
    The `n` most frequent words, highest count first.

    Equal counts are ordered by word so the output is reproducible.
    """
    if n <= 0:
        return []
    ranked = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
    return ranked[:n]


def format_row(word: str, count: int) -> str:
    return f"{word:<{WORD_COLUMN_WIDTH}}\t{count}"


def format_table(rows: List[Tuple[str, int]]) -> str:
    """Header, a blank line, then one line per word"""
    lines = [TABLE_HEADER, ""]
    lines.extend(format_row(word, count) for word, count in rows)
    return "\n".join(lines)


def format_failure(category: str, message: str) -> str:
    return f"\nException Caught!\nMessage :{category}: {message} "
