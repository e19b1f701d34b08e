"""
File Utilities Module
Collects the markup and script files to lint.
"""

import os
from pathlib import Path
from typing import Iterable, List

from analyzer.linter import LINTABLE_EXTENSIONS

SKIP_DIRS = frozenset({'node_modules', 'dist', 'build', 'coverage', '__pycache__'})


def is_skipped(name: str) -> bool:
    return name.startswith('.') or name in SKIP_DIRS


def find_lintable_files(directory: Path) -> List[Path]:
    """Lintable files below a directory, leaving out hidden and dependency folders."""
    found = []
    for root, dirs, files in os.walk(directory):
        dirs[:] = [d for d in dirs if not is_skipped(d)]
        found.extend(Path(root) / name for name in files
                     if not name.startswith('.') and Path(name).suffix.lower() in LINTABLE_EXTENSIONS)
    return sorted(found)


def collect_files(paths: Iterable[str | Path]) -> List[Path]:
    """
    Expand files and directories into the list of files to lint.

    Explicitly named files are kept whatever their extension; directories are
    searched for markup and script files.

    Raises:
        FileNotFoundError: If a path doesn't exist
    """
    collected: List[Path] = []
    seen = set()
    for path in paths:
        path = Path(path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"No such file or directory: {path}")
        for file_path in [path] if path.is_file() else find_lintable_files(path):
            if file_path not in seen:
                seen.add(file_path)
                collected.append(file_path)
    return collected
