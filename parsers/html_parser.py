"""
HTML Parser Module
Finds static class attributes in HTML and Vue templates, and hands Vue scripts to tree-sitter.
"""

from bs4 import BeautifulSoup
from typing import List, Optional, Union
from pathlib import Path
import logging

from analyzer.nodes import AttributeSite, Site, StringLiteral
from .jsx_treesitter_parser import parse_script

logger = logging.getLogger(__name__)

MARKUP_EXTENSIONS = frozenset({'.html', '.htm', '.vue'})

SCRIPT_LANG_EXTENSIONS = {
    'ts': '.ts',
    'tsx': '.tsx',
    'jsx': '.jsx',
}


class HTMLParser:
    """Parser for HTML and Vue single file components."""

    def parse_file(self, file_path: Union[str, Path]) -> List[Site]:
        """Parse a markup file and return its extraction sites."""
        try:
            logger.info(f"Starting to parse file: {file_path}")
            path = Path(file_path)

            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
                logger.debug(f"Successfully read file, content length: {len(content)}")

            return self.parse(content, file_path=str(path), is_vue=path.suffix.lower() == '.vue')

        except Exception as e:
            logger.error(f"Error parsing file {file_path}: {str(e)}", exc_info=True)
            raise

    def parse(self, content: str, file_path: Optional[str] = None, is_vue: bool = False) -> List[Site]:
        """Return attribute sites, plus script sites for Vue components, in document order."""
        # keep class attributes as raw strings instead of pre-split lists
        soup = BeautifulSoup(content, 'html.parser', multi_valued_attributes=None)
        sites: List[Site] = []
        for tag in soup.find_all(True):
            if is_vue and tag.name == 'script':
                sites.extend(self._parse_script(tag, file_path))
                continue
            sites.extend(self._parse_attributes(tag, file_path))
        logger.debug(f"Found {len(sites)} candidate sites in {file_path or 'markup'}")
        return sites

    def _parse_attributes(self, tag, file_path: Optional[str]) -> List[AttributeSite]:
        """One site per static attribute; the rule decides which ones name classes."""
        sites = []
        for key, value in tag.attrs.items():
            if not isinstance(value, str):
                value = ' '.join(value)
            sites.append(AttributeSite(
                name=key,
                value=StringLiteral(value),
                line=tag.sourceline or 1,
                column=tag.sourcepos or 0,
                file_path=file_path,
            ))
        return sites

    def _parse_script(self, tag, file_path: Optional[str]) -> List[Site]:
        code = tag.string or ''
        if not code.strip():
            return []
        extension = SCRIPT_LANG_EXTENSIONS.get((tag.get('lang') or '').lower(), '.js')
        line_offset = (tag.sourceline or 1) - 1
        logger.debug(f"Parsing Vue script block at line {tag.sourceline} as {extension}")
        return parse_script(code, extension, file_path=file_path, line_offset=line_offset)
