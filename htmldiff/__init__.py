"""
HTML Structure Diff
Reports where the element trees of two HTML documents disagree.
"""

from pathlib import Path
from typing import List, Optional, Union

from .comparator.differences import (
    Difference,
    ElementInformation,
    NodeAttributes,
    NodeName,
    NodeText,
    NodeType,
    NotPresent,
)
from .config import DiffConfig
from .core.html_parser import HTMLParser
from .core.structure_comparator import StructureComparator, TreeTooDeepError

__all__ = [
    'DiffConfig',
    'Difference',
    'ElementInformation',
    'HTMLParser',
    'NodeAttributes',
    'NodeName',
    'NodeText',
    'NodeType',
    'NotPresent',
    'StructureComparator',
    'TreeTooDeepError',
    'diff',
    'diff_files',
]


def diff(original: str, modified: str, config: Optional[DiffConfig] = None) -> List[Difference]:
    """Parse two HTML sources and return their differences in document order."""
    config = config or DiffConfig()
    parser = HTMLParser(config.parser)
    comparator = StructureComparator(max_depth=config.max_depth)
    return comparator.compare_structures(parser.parse(original), parser.parse(modified))


def diff_files(path: Union[str, Path], opposite_path: Union[str, Path],
               config: Optional[DiffConfig] = None) -> List[Difference]:
    config = config or DiffConfig()
    parser = HTMLParser(config.parser)
    comparator = StructureComparator(max_depth=config.max_depth)
    return comparator.compare_structures(parser.parse_file(path), parser.parse_file(opposite_path))
