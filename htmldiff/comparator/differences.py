"""
Differences Module
Value types describing where two HTML trees disagree, and their one-line rendering.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, Optional

# Longest content excerpt shown in a rendered difference.
MAX_CONTENT_WIDTH = 80


@dataclass(frozen=True)
class ElementInformation:
    """Snapshot of one side of a difference, detached from the parsed tree."""
    element_name: str
    element_content: str
    path: str


def _one_line(content: str, width: int = MAX_CONTENT_WIDTH) -> str:
    content = content.replace('\r', '\\r').replace('\n', '\\n')
    if len(content) > width:
        return content[:width - 3] + '...'
    return content


def _format_attributes(attrs: Dict[str, str]) -> str:
    if not attrs:
        return '{}'
    return '{' + ', '.join(f'{k}="{attrs[k]}"' for k in sorted(attrs)) + '}'


class Difference:
    """
    Base of the five difference categories.

    Every category carries ``elem`` (first document) and ``opposite_elem``
    (second document); ``NotPresent`` leaves the absent side as ``None``.
    """

    category = ''

    @property
    def path(self) -> str:
        present = self.elem if self.elem is not None else self.opposite_elem
        return present.path

    def is_node_type(self) -> bool:
        return isinstance(self, NodeType)

    def is_node_name(self) -> bool:
        return isinstance(self, NodeName)

    def is_node_attributes(self) -> bool:
        return isinstance(self, NodeAttributes)

    def is_node_text(self) -> bool:
        return isinstance(self, NodeText)

    def is_not_present(self) -> bool:
        return isinstance(self, NotPresent)

    def message(self) -> str:
        raise NotImplementedError

    def render(self) -> str:
        return f"/{self.path}: [{self.category.upper()}] {self.message()}"

    def to_dict(self) -> Dict:
        data = {'category': self.category, 'path': self.path}
        data.update(asdict(self))
        data['message'] = self.render()
        return data

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class NodeType(Difference):
    elem: ElementInformation
    opposite_elem: ElementInformation

    category = 'node_type'

    def message(self) -> str:
        return (f"expected `{_one_line(self.elem.element_content)}`, "
                f"found `{_one_line(self.opposite_elem.element_content)}`")


@dataclass(frozen=True)
class NodeName(Difference):
    elem: ElementInformation
    opposite_elem: ElementInformation

    category = 'node_name'

    def message(self) -> str:
        return (f"expected tag `{self.elem.element_name}`, "
                f"found tag `{self.opposite_elem.element_name}`")


@dataclass(frozen=True)
class NodeAttributes(Difference):
    elem: ElementInformation
    elem_attributes: Dict[str, str] = field(hash=False)
    opposite_elem: ElementInformation
    opposite_elem_attributes: Dict[str, str] = field(hash=False)

    category = 'node_attributes'

    def message(self) -> str:
        return (f"expected `{self.elem.element_name}` attributes "
                f"{_format_attributes(self.elem_attributes)}, "
                f"found {_format_attributes(self.opposite_elem_attributes)}")


@dataclass(frozen=True)
class NodeText(Difference):
    elem: ElementInformation
    elem_text: str
    opposite_elem: ElementInformation
    opposite_elem_text: str

    category = 'node_text'

    def message(self) -> str:
        return (f'expected text "{_one_line(self.elem_text)}", '
                f'found "{_one_line(self.opposite_elem_text)}"')


@dataclass(frozen=True)
class NotPresent(Difference):
    elem: Optional[ElementInformation] = None
    opposite_elem: Optional[ElementInformation] = None

    category = 'not_present'

    def __post_init__(self):
        if (self.elem is None) == (self.opposite_elem is None):
            raise ValueError("NotPresent needs exactly one present side")

    def message(self) -> str:
        if self.elem is not None:
            return f"missing `{_one_line(self.elem.element_content)}`"
        return f"unexpected `{_one_line(self.opposite_elem.element_content)}`"
