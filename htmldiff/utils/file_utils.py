"""
File Utilities Module
Common file operations and path handling functions.
"""

from pathlib import Path
from typing import List, Tuple, TypeVar

T = TypeVar('T')


def read_file_content(file_path: Path) -> str:
    """
    Safely read file content with proper encoding.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()


def pair_up(items: List[T]) -> List[Tuple[T, T]]:
    """
    Split a flat list into consecutive pairs.

    Raises:
        ValueError: If the list has an odd number of items
    """
    if len(items) % 2:
        raise ValueError(f"expected an even number of items, got {len(items)}")
    return [(items[i], items[i + 1]) for i in range(0, len(items), 2)]
