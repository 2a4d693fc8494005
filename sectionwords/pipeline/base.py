"""
Word Report - Composes fetcher, section extractor and word counter for one run
"""

import logging
import time

from ..config import ReportConfig
from ..counting import WordCounter
from ..dom import Marker, SectionExtractor, parse_document
from ..fetcher import PageFetcher
from ..report import top_words
from .result import ReportResult

logger = logging.getLogger(__name__)


class WordReport:
    """
    Linear run: fetch -> extract -> count -> rank.
    Extraction only starts after the fetch has completed successfully.
    """

    def __init__(self, config: ReportConfig, fetcher: PageFetcher = None, log_manager=None):
        self.config = config
        self.log_manager = log_manager
        self.fetcher = fetcher or PageFetcher(
            timeout=config.timeout,
            user_agent=config.user_agent,
            raise_for_status=config.raise_for_status,
            log_manager=log_manager
        )
        self.extractor = SectionExtractor(heading_tag=config.heading_tag)
        self.counter = WordCounter(config.excluded_words)

    @property
    def start_marker(self) -> Marker:
        return Marker(self.config.start_marker, self.config.heading_tag)

    @property
    def end_marker(self) -> Marker:
        return Marker(self.config.end_marker, self.config.heading_tag)

    def analyze(self, url: str, markup: str, fetch) -> ReportResult:
        """Extract, count and rank already-fetched markup"""
        start_time = time.time()

        document = parse_document(markup)
        section = self.extractor.extract(document, self.start_marker, self.end_marker)
        counts = self.counter.count(section.blocks)
        rows = top_words(counts, self.config.top_n)

        logger.info(f"Counted {sum(counts.values())} words ({len(counts)} distinct) "
                    f"in {len(section.blocks)} blocks")
        if self.log_manager:
            self.log_manager.log_performance_event(
                'analysis_completed',
                url=url,
                blocks=len(section.blocks),
                distinct_words=len(counts),
                end_reached=section.end_reached,
                duration=round(time.time() - start_time, 3)
            )

        return ReportResult(url=url, fetch=fetch, section=section, counts=counts, rows=rows)

    async def run(self) -> ReportResult:
        """Main report workflow"""
        url = self.config.url
        fetch = await self.fetcher.fetch(url)
        if not fetch.ok:
            return ReportResult(url=url, fetch=fetch)
        return self.analyze(url, fetch.content, fetch)
