"""
Report Builder Module
Generates comparison reports (text, JSON or HTML via Jinja2 templates).
"""

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pathlib import Path
from typing import Dict, List, Optional, Union
import json
import logging

from .differences import Difference

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / 'templates'

CATEGORIES = ('node_type', 'node_name', 'node_attributes', 'node_text', 'not_present')


class ReportBuilder:
    def __init__(self, template_dir: Optional[Path] = None):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(['html']),
        )
        self.template = None
        self.data = {'comparisons': []}

    def collect_metrics(self, differences: List[Difference]) -> Dict[str, int]:
        """Count differences per category."""
        metrics = {category: 0 for category in CATEGORIES}
        for difference in differences:
            metrics[difference.category] += 1
        metrics['total'] = len(differences)
        return metrics

    def add_comparison(self, original: str, modified: str, differences: List[Difference]) -> Dict:
        """Record the result of comparing one pair of documents."""
        entry = {
            'original': original,
            'modified': modified,
            'summary': self.collect_metrics(differences),
            'differences': [difference.to_dict() for difference in differences],
        }
        self.data['comparisons'].append(entry)
        logger.debug(f"Added comparison {original} vs {modified}: {entry['summary']['total']} difference(s)")
        return entry

    def generate_text_report(self, output_path: Optional[Union[str, Path]] = None) -> str:
        """One header line per pair followed by one line per difference."""
        lines = []
        for entry in self.data['comparisons']:
            total = entry['summary']['total']
            if total == 0:
                lines.append(f"{entry['original']} and {entry['modified']} are identical")
                continue
            lines.append(f"{entry['original']} vs {entry['modified']}: {total} difference(s)")
            for difference in entry['differences']:
                lines.append(f"  {difference['message']}")
        report = '\n'.join(lines) + '\n' if lines else ''
        return self._write(report, output_path)

    def generate_json_report(self, output_path: Optional[Union[str, Path]] = None) -> str:
        """Generate JSON report with raw comparison data."""
        return self._write(json.dumps(self.data, indent=2) + '\n', output_path)

    def generate_html_report(self, output_path: Optional[Union[str, Path]] = None) -> str:
        """Generate HTML report listing every compared pair."""
        self.template = self.env.get_template('report.html')
        report = self.template.render(comparisons=self.data['comparisons'], categories=CATEGORIES)
        return self._write(report, output_path)

    def generate(self, output_format: str, output_path: Optional[Union[str, Path]] = None) -> str:
        generators = {
            'text': self.generate_text_report,
            'json': self.generate_json_report,
            'html': self.generate_html_report,
        }
        if output_format not in generators:
            raise ValueError(f"Unknown report format: {output_format}")
        return generators[output_format](output_path)

    def _write(self, report: str, output_path: Optional[Union[str, Path]]) -> str:
        if output_path is not None:
            try:
                Path(output_path).write_text(report, encoding='utf-8')
                logger.info(f"Report written to {output_path}")
            except OSError as e:
                logger.error(f"Error writing report {output_path}: {str(e)}", exc_info=True)
                raise
        return report
