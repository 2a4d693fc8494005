from dataclasses import dataclass

from bs4 import Tag


@dataclass(frozen=True)
class Marker:
    """Heading predicate: element with tag `tag` whose rendered text contains `text`"""
    text: str
    tag: str = 'h2'

    def matches(self, node) -> bool:
        return (isinstance(node, Tag)
                and node.name == self.tag
                and self.text in node.get_text())

    def find(self, document):
        """First matching element in document order, or None"""
        return document.find(self.matches)
