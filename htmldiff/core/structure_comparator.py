"""
Structure Comparator Module
Walks two parsed HTML trees side by side and reports where they disagree.

Children are paired strictly by position after dropping comments and
whitespace-only text. A mismatch at a position is reported once and its
subtree is not descended into; sibling comparison carries on.
"""

from typing import Iterator, List, Optional
import logging

from bs4.element import PageElement

from ..comparator.differences import (
    Difference,
    ElementInformation,
    NodeAttributes,
    NodeName,
    NodeText,
    NodeType,
    NotPresent,
)
from . import node_view
from .node_view import NodeKind
from .path_tracker import PathTracker

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256


class TreeTooDeepError(RecursionError):
    """Raised when the documents nest deeper than the comparator allows."""

    def __init__(self, depth: int, path: str):
        self.depth = depth
        self.path = path
        super().__init__(f"document nesting exceeds {depth} levels at /{path}")


def is_significant(node: PageElement) -> bool:
    """Comments and whitespace-only text take no part in the comparison."""
    kind = node_view.node_kind(node)
    if kind is NodeKind.COMMENT:
        return False
    if kind is NodeKind.TEXT:
        return bool(node_view.text(node).strip())
    return True


def significant_children(node: PageElement) -> Iterator[PageElement]:
    return (child for child in node_view.children(node) if is_significant(child))


def _snapshot(node: PageElement, path: PathTracker) -> ElementInformation:
    return ElementInformation(
        element_name=node_view.tag_name(node),
        element_content=node_view.serialize(node),
        path=str(path),
    )


class StructureComparator:
    """
    Positional tree comparator.

    The instance only holds configuration; the path, sibling counter and
    result list of a traversal live on the call stack, so one comparator can
    be shared between callers.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def compare_elements(self, elem: PageElement, opposite_elem: PageElement,
                         path: PathTracker) -> Optional[Difference]:
        """Compare tag names, then attribute sets, of two same-position elements."""
        name = node_view.tag_name(elem)
        opposite_name = node_view.tag_name(opposite_elem)
        if name != opposite_name:
            return NodeName(
                elem=_snapshot(elem, path),
                opposite_elem=_snapshot(opposite_elem, path),
            )

        attrs = node_view.attributes(elem)
        opposite_attrs = node_view.attributes(opposite_elem)
        if len(attrs) != len(opposite_attrs) or any(
                opposite_attrs.get(key) != value for key, value in attrs.items()):
            return NodeAttributes(
                elem=_snapshot(elem, path),
                elem_attributes=attrs,
                opposite_elem=_snapshot(opposite_elem, path),
                opposite_elem_attributes=opposite_attrs,
            )
        return None

    def _compare_nodes(self, node: Optional[PageElement], opposite_node: Optional[PageElement],
                       path: PathTracker) -> Optional[Difference]:
        """Classify one positional pair; ``None`` means the pair is equivalent."""
        if node is None or opposite_node is None:
            return NotPresent(
                elem=_snapshot(node, path) if node is not None else None,
                opposite_elem=_snapshot(opposite_node, path) if opposite_node is not None else None,
            )

        kind = node_view.node_kind(node)
        opposite_kind = node_view.node_kind(opposite_node)
        if kind is not opposite_kind:
            return NodeType(
                elem=_snapshot(node, path),
                opposite_elem=_snapshot(opposite_node, path),
            )

        if kind is NodeKind.ELEMENT:
            return self.compare_elements(node, opposite_node, path)

        if kind is NodeKind.TEXT:
            node_text = node_view.text(node)
            opposite_text = node_view.text(opposite_node)
            if node_text != opposite_text:
                return NodeText(
                    elem=_snapshot(node, path),
                    elem_text=node_text,
                    opposite_elem=_snapshot(opposite_node, path),
                    opposite_elem_text=opposite_text,
                )
            return None

        # Neither element nor text: equal by definition.
        return None

    def _compare_children(self, node: PageElement, opposite_node: PageElement,
                          path: PathTracker, depth: int) -> List[Difference]:
        if depth > self.max_depth:
            raise TreeTooDeepError(self.max_depth, str(path))

        differences = []
        # counts matched element siblings only
        pos = 0
        children = significant_children(node)
        opposite_children = significant_children(opposite_node)

        while True:
            child = next(children, None)
            opposite_child = next(opposite_children, None)
            if child is None and opposite_child is None:
                break

            difference = self._compare_nodes(child, opposite_child, path)
            if difference is not None:
                logger.debug(f"Difference found: {difference}")
                differences.append(difference)
                continue

            # text and other leaves have no children to descend into
            name = node_view.tag_name(child)
            if not name:
                continue
            path.push(PathTracker.segment(name, pos))
            pos += 1
            try:
                differences.extend(
                    self._compare_children(child, opposite_child, path, depth + 1)
                )
            finally:
                path.pop()

        return differences

    def compare_structures(self, tree: PageElement, opposite_tree: PageElement) -> List[Difference]:
        """Compare two document roots and return differences in document order."""
        try:
            differences = self._compare_children(tree, opposite_tree, PathTracker(), 0)
            logger.info(f"Comparison complete: {len(differences)} difference(s)")
            return differences
        except Exception as e:
            logger.error(f"Error during comparison: {str(e)}", exc_info=True)
            raise
