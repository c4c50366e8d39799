"""
Web Interface for HTML Structure Diff
"""

import os
import sys
import logging
from typing import Optional

from flask import Blueprint, Flask, current_app, request, jsonify

from ..comparator.report_builder import ReportBuilder
from ..config import DiffConfig
from ..core.html_parser import HTMLParser
from ..core.structure_comparator import StructureComparator, TreeTooDeepError

logger = logging.getLogger(__name__)

bp = Blueprint('diff', __name__)


class InvalidInput(ValueError):
    """Client sent documents that cannot be compared."""


def create_app(config: Optional[DiffConfig] = None) -> Flask:
    """Build the application; without a config, read it from ``HTMLDIFF_*`` variables."""
    app = Flask(__name__)
    app.config['DIFF_CONFIG'] = config if config is not None else DiffConfig.from_env()
    app.register_blueprint(bp)
    return app


def _decode_upload(name: str) -> str:
    try:
        return request.files[name].read().decode('utf-8')
    except UnicodeDecodeError:
        raise InvalidInput(f"{name} is not valid UTF-8") from None


def _read_documents():
    """Return (original, modified) from uploaded files or a JSON body."""
    if 'original_file' in request.files and 'modified_file' in request.files:
        return _decode_upload('original_file'), _decode_upload('modified_file')
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    original = payload.get('original')
    modified = payload.get('modified')
    if not isinstance(original, str) or not isinstance(modified, str):
        raise InvalidInput('Both original and modified HTML documents are required')
    return original, modified


@bp.route('/diff', methods=['POST'])
def diff_documents():
    """Compare two HTML documents and return the differences as JSON."""
    try:
        original, modified = _read_documents()

        config = current_app.config['DIFF_CONFIG']
        parser = HTMLParser(config.parser)
        comparator = StructureComparator(max_depth=config.max_depth)
        differences = comparator.compare_structures(parser.parse(original), parser.parse(modified))

        report = ReportBuilder()
        return jsonify(report.add_comparison('original', 'modified', differences))
    except InvalidInput as e:
        return jsonify({'error': str(e)}), 400
    except TreeTooDeepError as e:
        return jsonify({'error': str(e)}), 422
    except Exception as e:
        logger.error(f"Error comparing documents: {str(e)}", exc_info=True)
        return jsonify({'error': str(e)}), 500


if __name__ == '__main__':
    try:
        app = create_app()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)
    port = int(os.environ.get("PORT", 5000))
    app.run(host='0.0.0.0', port=port)
