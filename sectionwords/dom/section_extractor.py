"""
Section Extractor - Collects the text between two heading markers

The walk moves across siblings of the start heading only, never into
children or up to the parent. It stops at the node that *is* the end
heading, or when siblings run out. When the two headings are not siblings
(the end heading is nested deeper, or comes first) the end is never
reached and whatever was collected up to the last sibling is returned.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .document import flattened_text
from .marker import Marker

logger = logging.getLogger(__name__)


@dataclass
class SectionResult:
    """Text blocks between two markers plus how the walk ended"""
    blocks: List[str] = field(default_factory=list)
    start_found: bool = False
    end_found: bool = False
    end_reached: bool = False

    @property
    def markers_found(self) -> bool:
        return self.start_found and self.end_found


def iter_siblings(start, stop) -> Iterator:
    """Yield the siblings following `start` up to (not including) `stop`"""
    node = start.next_sibling
    while node is not None and node is not stop:
        yield node
        node = node.next_sibling


class SectionExtractor:
    """Extracts plain text blocks found between a start and an end heading"""

    def __init__(self, heading_tag: str = 'h2'):
        self.heading_tag = heading_tag

    def _as_marker(self, marker: Union[Marker, str]) -> Marker:
        if isinstance(marker, Marker):
            return marker
        return Marker(marker, self.heading_tag)

    def extract(self, document, start_marker: Union[Marker, str],
                end_marker: Union[Marker, str]) -> SectionResult:
        """
        Walk the siblings between the start and end headings.

        Args:
            document: Parsed document tree
            start_marker: Marker (or marker text) of the opening heading
            end_marker: Marker (or marker text) of the closing heading

        Returns:
            SectionResult with the non-blank sibling texts in document order
        """
        start = self._as_marker(start_marker)
        end = self._as_marker(end_marker)

        start_node = start.find(document)
        if start_node is None:
            logger.info(f"Start heading not found: <{start.tag}> containing '{start.text}'")
            return SectionResult()

        end_node = end.find(document)
        if end_node is None:
            logger.info(f"End heading not found: <{end.tag}> containing '{end.text}'")
            return SectionResult(start_found=True)

        blocks = []
        last = start_node
        for node in iter_siblings(start_node, end_node):
            text = flattened_text(node)
            if text.strip():
                blocks.append(text)
            last = node

        end_reached = last.next_sibling is end_node
        if not end_reached:
            logger.warning(
                f"End heading '{end.text}' is not a later sibling of '{start.text}'; "
                f"section ran to the last sibling ({len(blocks)} blocks collected)"
            )

        logger.debug(f"Extracted {len(blocks)} text blocks between '{start.text}' and '{end.text}'")
        return SectionResult(
            blocks=blocks,
            start_found=True,
            end_found=True,
            end_reached=end_reached
        )


def extract_blocks(document, start_marker: Union[Marker, str],
                   end_marker: Union[Marker, str]) -> List[str]:
    """Ordered text blocks between two `h2` markers; empty if either is missing"""
    return SectionExtractor().extract(document, start_marker, end_marker).blocks
