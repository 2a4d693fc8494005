"""
sectionwords - Word frequencies for one section of a web page
"""

from .config import ReportConfig
from .counting import count_words
from .dom import SectionExtractor, extract_blocks, parse_document
from .fetcher import FetchResult, PageFetcher
from .pipeline import ReportBuilder, ReportResult, WordReport
from .report import format_table, top_words

__all__ = [
    'ReportConfig',
    'count_words',
    'SectionExtractor',
    'extract_blocks',
    'parse_document',
    'FetchResult',
    'PageFetcher',
    'ReportBuilder',
    'ReportResult',
    'WordReport',
    'format_table',
    'top_words'
]
