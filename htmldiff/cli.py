"""
Command line entry point.

Usage:
    htmldiff original.html modified.html [original2.html modified2.html ...]

Files are compared pairwise: the first against the second, the third
against the fourth, and so on. A pair whose files cannot be read is
reported and skipped; the remaining pairs are still compared.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .comparator.report_builder import ReportBuilder
from .config import OUTPUT_FORMATS, DiffConfig
from .core.html_parser import HTMLParser
from .core.structure_comparator import StructureComparator, TreeTooDeepError
from .utils.file_utils import pair_up, read_file_content

logger = logging.getLogger(__name__)

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='htmldiff',
        description='Report structural differences between pairs of HTML files.',
    )
    parser.add_argument('files', nargs='+', metavar='FILE',
                        help='HTML files, compared pairwise')
    parser.add_argument('--format', dest='output_format', choices=OUTPUT_FORMATS, default='text',
                        help='report format (default: text)')
    parser.add_argument('--output', type=Path, default=None,
                        help='write the report to this file instead of stdout')
    parser.add_argument('--parser', default=DiffConfig.parser,
                        help='BeautifulSoup parser backend (default: %(default)s)')
    parser.add_argument('--max-depth', type=int, default=DiffConfig.max_depth,
                        help='maximum nesting depth to compare (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def _read(path: str) -> Optional[str]:
    """Read one input file, reporting the failure instead of raising."""
    try:
        return read_file_content(Path(path))
    except (OSError, UnicodeDecodeError) as e:
        print(f'"{path}": error: {e}', file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        pairs = pair_up(args.files)
    except ValueError:
        print("Need to pass an even number of HTML files", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = DiffConfig(parser=args.parser, max_depth=args.max_depth,
                            output_format=args.output_format)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    html_parser = HTMLParser(config.parser)
    comparator = StructureComparator(max_depth=config.max_depth)
    report = ReportBuilder()
    failed = False
    differs = False

    for original, modified in pairs:
        original_content = _read(original)
        modified_content = _read(modified)
        if original_content is None or modified_content is None:
            failed = True
            continue
        try:
            differences = comparator.compare_structures(
                html_parser.parse(original_content),
                html_parser.parse(modified_content),
            )
        except TreeTooDeepError as e:
            print(f'"{original}" vs "{modified}": error: {e}', file=sys.stderr)
            failed = True
            continue
        differs = differs or bool(differences)
        report.add_comparison(original, modified, differences)

    try:
        output = report.generate(config.output_format, args.output)
    except OSError as e:
        print(f'"{args.output}": error: {e}', file=sys.stderr)
        return EXIT_ERROR
    if args.output is None:
        sys.stdout.write(output)

    if failed:
        return EXIT_ERROR
    return EXIT_DIFFERENT if differs else EXIT_IDENTICAL


if __name__ == '__main__':
    sys.exit(main())
