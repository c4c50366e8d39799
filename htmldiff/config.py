"""
Configuration Module
Settings shared by the library, the command line and the web interface.
"""

import os
from dataclasses import dataclass

from .core.html_parser import DEFAULT_PARSER
from .core.structure_comparator import DEFAULT_MAX_DEPTH

OUTPUT_FORMATS = ('text', 'json', 'html')


@dataclass
class DiffConfig:
    parser: str = DEFAULT_PARSER
    max_depth: int = DEFAULT_MAX_DEPTH
    output_format: str = 'text'

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r}, expected one of {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_env(cls, environ=None) -> 'DiffConfig':
        """Build a config from ``HTMLDIFF_*`` environment variables."""
        environ = os.environ if environ is None else environ
        max_depth = environ.get('HTMLDIFF_MAX_DEPTH', str(DEFAULT_MAX_DEPTH))
        try:
            max_depth = int(max_depth)
        except ValueError:
            raise ValueError(f"HTMLDIFF_MAX_DEPTH must be an integer, got {max_depth!r}") from None
        return cls(
            parser=environ.get('HTMLDIFF_PARSER', DEFAULT_PARSER),
            max_depth=max_depth,
            output_format=environ.get('HTMLDIFF_FORMAT', 'text'),
        )
