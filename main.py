#!/usr/bin/env python3
"""
Tailwind Negative Arbitrary Values Checker
Main entry point for the command line tool.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from analyzer.linter import Linter
from analyzer.negative_arbitrary_rule import NegativeArbitraryValuesRule
from analyzer.settings import InvalidOptionsError
from reporting.report_builder import ReportBuilder
from utils.file_utils import collect_files

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tw-negative-arbitrary',
        description="Warns about dash prefixed Tailwind classnames using arbitrary values, e.g. -top-[1px]",
    )
    parser.add_argument('paths', nargs='+', help="Files or directories to lint")
    parser.add_argument('--callees', nargs='*', help="Function names whose arguments hold class names")
    parser.add_argument('--tags', nargs='*', help="Template tags whose bodies hold class names")
    parser.add_argument('--config', help="Path to the Tailwind config (default: tailwind.config.js)")
    parser.add_argument('--class-regex', help="Pattern matching class attribute names")
    parser.add_argument('--settings', help="JSON file with shared settings, e.g. {\"tailwindcss\": {...}}")
    parser.add_argument('--format', choices=('text', 'json'), default='text')
    parser.add_argument('--output', help="Write the report to this file instead of stdout")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    if args.callees is not None:
        options['callees'] = args.callees
    if args.tags is not None:
        options['tags'] = args.tags
    if args.config:
        options['config'] = args.config
    if args.class_regex:
        options['classRegex'] = args.class_regex
    return options


def load_settings(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        settings = json.load(f)
    if not isinstance(settings, dict):
        raise InvalidOptionsError(f"Settings file {path} must contain a JSON object")
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        settings = load_settings(args.settings)
        rule = NegativeArbitraryValuesRule(options_from_args(args), settings)
        files = collect_files(args.paths)
    except (OSError, ValueError) as e:
        # InvalidOptionsError and JSON errors are ValueErrors, missing paths OSErrors
        print(f"Error: {e}", file=sys.stderr)
        return 2

    results = Linter(rule).lint_files(files)

    builder = ReportBuilder()
    builder.collect_metrics(results)
    if args.format == 'json':
        report = builder.generate_json_report(args.output)
    else:
        report = builder.generate_text_report(args.output)
    if not args.output and report:
        print(report)

    return 1 if results else 0


if __name__ == "__main__":
    sys.exit(main())
