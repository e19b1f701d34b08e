"""
Linter Module
Runs the negative arbitrary values rule over markup and script files.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from parsers.html_parser import MARKUP_EXTENSIONS, HTMLParser
from parsers.jsx_treesitter_parser import SCRIPT_EXTENSIONS, parse_script

from .negative_arbitrary_rule import Diagnostic, NegativeArbitraryValuesRule

logger = logging.getLogger(__name__)

LINTABLE_EXTENSIONS = SCRIPT_EXTENSIONS | MARKUP_EXTENSIONS


class Linter:
    def __init__(self, rule: Optional[NegativeArbitraryValuesRule] = None):
        self.rule = rule or NegativeArbitraryValuesRule()
        self.html_parser = HTMLParser()

    def lint_text(self, content: str, extension: str = '.jsx', file_path: Optional[str] = None) -> List[Diagnostic]:
        """Lint source text, the extension selecting the parser."""
        extension = extension.lower()
        if extension in MARKUP_EXTENSIONS:
            sites = self.html_parser.parse(content, file_path=file_path, is_vue=extension == '.vue')
        else:
            sites = parse_script(content, extension, file_path=file_path)
        diagnostics = []
        for site in sites:
            diagnostics.extend(self.rule.visit(site))
        return diagnostics

    def lint_file(self, file_path: Union[str, Path]) -> List[Diagnostic]:
        """Lint one file; unreadable or unparsable files are logged and skipped."""
        path = Path(file_path)
        extension = path.suffix.lower()
        if extension not in LINTABLE_EXTENSIONS:
            logger.debug(f"Skipping unsupported file: {path}")
            return []
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
            return self.lint_text(content, extension, file_path=str(path))
        except Exception as e:
            logger.error(f"Error linting file {path}: {str(e)}", exc_info=True)
            return []

    def lint_files(self, file_paths: Iterable[Union[str, Path]]) -> Dict[str, List[Diagnostic]]:
        """Lint several files, keyed by path, keeping only files with diagnostics."""
        results = {}
        for file_path in file_paths:
            diagnostics = self.lint_file(file_path)
            if diagnostics:
                results[str(file_path)] = diagnostics
        logger.info(f"Linted files, {sum(len(d) for d in results.values())} problem(s) in {len(results)} file(s)")
        return results
