"""
Word report pipeline - fetch, extract, count, rank
"""

from .base import WordReport
from .builder import ReportBuilder
from .result import ReportResult

__all__ = ['WordReport', 'ReportBuilder', 'ReportResult']
