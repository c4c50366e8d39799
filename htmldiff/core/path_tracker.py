"""
Path Tracker Module
Ordered stack of ``tag[index]`` segments locating the node under comparison.
"""

from typing import List, Tuple


class PathTracker:
    """Mutable ancestor chain, pushed and popped around recursive descent."""

    def __init__(self):
        self._segments: List[str] = []

    @staticmethod
    def segment(tag: str, index: int) -> str:
        return f"{tag}[{index}]"

    def push(self, segment: str) -> None:
        self._segments.append(segment)

    def pop(self) -> str:
        if not self._segments:
            raise IndexError("pop from an empty path")
        return self._segments.pop()

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self._segments)

    @property
    def depth(self) -> int:
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __str__(self) -> str:
        return '/'.join(self._segments)

    def __repr__(self) -> str:
        return f"PathTracker({str(self)!r})"
