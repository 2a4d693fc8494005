from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


def parse_document(markup: str) -> BeautifulSoup:
    """Parse raw page markup into a document tree"""
    return BeautifulSoup(markup, 'html.parser')


def flattened_text(node) -> str:
    """
    Concatenated text of all descendant text nodes, markup stripped.

    Comments, CDATA, doctypes and processing instructions are not rendered
    text and flatten to an empty string.
    """
    if isinstance(node, PreformattedString):
        return ''
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        return node.get_text()
    return ''
