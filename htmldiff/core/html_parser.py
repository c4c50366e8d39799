"""
HTML Parser Module
Parses HTML content into a BeautifulSoup tree for structural comparison.
"""

from bs4 import BeautifulSoup
from typing import Union
from pathlib import Path
import logging

from ..utils.file_utils import read_file_content

logger = logging.getLogger(__name__)

DEFAULT_PARSER = 'html.parser'


class HTMLParser:
    """Parser for HTML content."""

    def __init__(self, parser_name: str = DEFAULT_PARSER):
        """Initialize the HTML parser with the given BeautifulSoup backend."""
        self.parser_name = parser_name

    def parse_file(self, file_path: Union[str, Path]) -> BeautifulSoup:
        """Parse HTML file and return the document tree."""
        try:
            logger.info(f"Starting to parse file: {file_path}")
            content = read_file_content(Path(file_path))
            logger.debug(f"Successfully read file, content length: {len(content)}")
            return self.parse(content)

        except Exception as e:
            logger.error(f"Error parsing file {file_path}: {str(e)}", exc_info=True)
            raise

    def parse(self, html_content: str) -> BeautifulSoup:
        """
        Parse HTML content into a document tree.

        Malformed markup never fails: the backend always produces a
        best-effort tree. Attribute values are kept as raw strings, so
        ``class="a b"`` stays ``"a b"`` instead of becoming a list.
        """
        logger.debug(f"Input HTML content length: {len(html_content)}")
        soup = BeautifulSoup(
            html_content,
            self.parser_name,
            multi_valued_attributes=None,
        )
        logger.debug(f"{self.parser_name} parsing complete")
        return soup
