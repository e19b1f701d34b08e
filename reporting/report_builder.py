"""
Report Builder Module
Renders lint diagnostics as a text report (Jinja2 template) or as JSON.
"""

import json
from jinja2 import Environment, FileSystemLoader
from pathlib import Path
from typing import Dict, List, Optional, Union

TEMPLATES_DIR = Path(__file__).parent / 'templates'


class ReportBuilder:
    def __init__(self, severity: str = 'warning'):
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), trim_blocks=True, lstrip_blocks=True)
        self.template = self.env.get_template('report.txt.j2')
        self.severity = severity
        self.data = {}

    def collect_metrics(self, results: Dict[str, List]) -> Dict:
        """Collect diagnostics per file, sorted by position, and the totals."""
        files = {
            file: sorted(diagnostics, key=lambda d: (d.line, d.column))
            for file, diagnostics in sorted(results.items())
        }
        self.data = {
            'files': files,
            'total': sum(len(d) for d in files.values()),
            'severity': self.severity,
        }
        return self.data

    def generate_text_report(self, output_path: Optional[Union[str, Path]] = None) -> str:
        """Render the collected diagnostics in a stylish, human readable format."""
        report = self.template.render(**self.data)
        if output_path:
            Path(output_path).write_text(report, encoding='utf-8')
        return report

    def generate_json_report(self, output_path: Optional[Union[str, Path]] = None) -> str:
        """Render the collected diagnostics as JSON."""
        payload = {
            'total': self.data.get('total', 0),
            'files': {
                file: [d.to_dict() for d in diagnostics]
                for file, diagnostics in self.data.get('files', {}).items()
            },
        }
        report = json.dumps(payload, indent=2)
        if output_path:
            Path(output_path).write_text(report, encoding='utf-8')
        return report
