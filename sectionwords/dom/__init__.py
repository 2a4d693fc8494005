"""
Document parsing and section extraction
"""

from .document import parse_document, flattened_text
from .marker import Marker
from .section_extractor import SectionExtractor, SectionResult, extract_blocks

__all__ = [
    'parse_document',
    'flattened_text',
    'Marker',
    'SectionExtractor',
    'SectionResult',
    'extract_blocks'
]
