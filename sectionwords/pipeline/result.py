"""
Report Result - Outcome of one word report run
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..dom import SectionResult
from ..fetcher import FetchResult


@dataclass
class ReportResult:
    """Ranked words for a page section, or the fetch failure that stopped the run"""
    url: str
    fetch: FetchResult
    section: Optional[SectionResult] = None
    counts: Dict[str, int] = field(default_factory=dict)
    rows: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.fetch.ok

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'url': self.url,
            'ok': self.ok,
            'status_code': self.fetch.status_code,
            'response_time': round(self.fetch.response_time, 3),
        }
        if not self.ok:
            data['error_type'] = self.fetch.error_type.value if self.fetch.error_type else None
            data['error'] = self.fetch.error
            return data

        data.update({
            'end_reached': self.section.end_reached if self.section else False,
            'blocks': len(self.section.blocks) if self.section else 0,
            'distinct_words': len(self.counts),
            'top_words': [{'word': word, 'count': count} for word, count in self.rows],
        })
        return data
