"""
Node View Module
Read-only accessors over BeautifulSoup nodes used by the comparator.
"""

from enum import Enum
from typing import Dict, Iterator, Optional

from bs4.element import (
    Comment,
    NavigableString,
    PageElement,
    PreformattedString,
    Tag,
)


class NodeKind(Enum):
    ELEMENT = 'element'
    TEXT = 'text'
    COMMENT = 'comment'
    # doctype, CDATA, processing instructions, declarations
    OTHER = 'other'


def node_kind(node: PageElement) -> NodeKind:
    """Classify a node. ``Comment`` is a string subclass, so check it first."""
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def is_element(node: PageElement) -> bool:
    return node_kind(node) is NodeKind.ELEMENT


def is_text(node: PageElement) -> bool:
    return node_kind(node) is NodeKind.TEXT


def tag_name(node: PageElement) -> str:
    """Tag name of an element, empty string for anything else."""
    if isinstance(node, Tag):
        return node.name or ''
    return ''


def attributes(node: PageElement) -> Dict[str, str]:
    """Snapshot of an element's attributes as plain strings."""
    if not isinstance(node, Tag):
        return {}
    attrs = {}
    for key, value in node.attrs.items():
        if isinstance(value, (list, tuple)):
            value = ' '.join(value)
        attrs[key] = '' if value is None else str(value)
    return attrs


def children(node: PageElement) -> Iterator[PageElement]:
    """Children in document order; non-elements have none."""
    if isinstance(node, Tag):
        return iter(node.contents)
    return iter(())


def text(node: PageElement) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    return ''


def serialize(node: Optional[PageElement]) -> str:
    """Markup for elements, raw string content for everything else."""
    if node is None:
        return ''
    if isinstance(node, Tag):
        return node.decode()
    return str(node)
