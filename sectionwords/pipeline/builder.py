"""
Report Builder - Fluent API for configuring a word report
"""

from dataclasses import replace
from typing import Iterable, Optional

from ..config import ReportConfig
from ..counting import normalize_exclusions
from .base import WordReport


class ReportBuilder:
    """Builder for creating word reports"""

    def __init__(self, url: str):
        self.config = ReportConfig(url=url)
        self._fetcher = None
        self._log_manager = None

    @classmethod
    def from_config(cls, config: ReportConfig) -> 'ReportBuilder':
        builder = cls(config.url)
        builder.config = replace(config)
        return builder

    def markers(self, start: str, end: str):
        """Set the headings that open and close the section"""
        self.config.start_marker = start
        self.config.end_marker = end
        return self

    def heading_tag(self, tag: str):
        self.config.heading_tag = tag
        return self

    def top(self, count: int):
        """Set how many words to report"""
        self.config.top_n = count
        return self

    def exclude(self, words: Iterable[str]):
        """Add words to the stoplist"""
        self.config.excluded_words = self.config.excluded_words | normalize_exclusions(words)
        return self

    def timeout(self, seconds: Optional[float]):
        self.config.timeout = seconds
        return self

    def user_agent(self, user_agent: str):
        self.config.user_agent = user_agent
        return self

    def with_fetcher(self, fetcher):
        """Use a preconfigured fetcher instead of building one from the config"""
        self._fetcher = fetcher
        return self

    def with_log_manager(self, log_manager):
        self._log_manager = log_manager
        return self

    def build(self) -> WordReport:
        """Build the configured report"""
        return WordReport(self.config, fetcher=self._fetcher, log_manager=self._log_manager)
