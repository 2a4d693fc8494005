from dataclasses import dataclass
from typing import Iterable, Optional

from .counting import normalize_exclusions
from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

DEFAULT_URL = 'https://en.wikipedia.org/wiki/Microsoft'
DEFAULT_START_MARKER = 'History'
DEFAULT_END_MARKER = 'Corporate affairs'
DEFAULT_HEADING_TAG = 'h2'
DEFAULT_TOP_N = 10


@dataclass
class ReportConfig:
    """Configuration for one word report run"""
    url: str = DEFAULT_URL
    start_marker: str = DEFAULT_START_MARKER
    end_marker: str = DEFAULT_END_MARKER
    heading_tag: str = DEFAULT_HEADING_TAG
    top_n: int = DEFAULT_TOP_N
    excluded_words: Optional[Iterable[str]] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    raise_for_status: bool = True

    def __post_init__(self):
        if self.excluded_words is None:
            self.excluded_words = set()
        elif isinstance(self.excluded_words, str):
            self.excluded_words = [self.excluded_words]
        self.excluded_words = normalize_exclusions(self.excluded_words)
