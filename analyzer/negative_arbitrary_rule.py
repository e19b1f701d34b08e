"""
Negative Arbitrary Values Rule
Warns about dash prefixed Tailwind classnames using arbitrary values, e.g. `-top-[1px]`.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from tailwind.class_tokens import split_class_names
from tailwind.config_reader import TailwindConfigReader
from tailwind.negative_arbitrary_classifier import NegativeArbitraryClassifier

from .nodes import AttributeSite, CallSite, ExpressionNode, StringLiteral, TaggedTemplateSite, site_to_dict
from .settings import RuleOptions, resolve_options
from .value_extractor import extract

logger = logging.getLogger(__name__)

RULE_ID = 'enforces-negative-arbitrary-values'
MESSAGE_ID = 'negativeArbitraryValue'
NEGATIVE_ARBITRARY_VALUE = "Arbitrary value classname '{classname}' should not start with a dash (-)"

RULE_META = {
    'docs': {
        'description': 'Warns about dash prefixed classnames using arbitrary values',
        'category': 'Best Practices',
        'recommended': True,
    },
    'messages': {MESSAGE_ID: NEGATIVE_ARBITRARY_VALUE},
    'fixable': None,
}

# Literal attribute values holding template syntax are left to the framework
TEMPLATE_SYNTAX = re.compile(r'\{|\?|\}')


@dataclass(frozen=True)
class Diagnostic:
    site: Any
    classname: str
    rule_id: str = RULE_ID
    message_id: str = MESSAGE_ID

    @property
    def message(self) -> str:
        return RULE_META['messages'][self.message_id].format(classname=self.classname)

    @property
    def line(self) -> int:
        return self.site.line

    @property
    def column(self) -> int:
        return self.site.column

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rule': self.rule_id,
            'message_id': self.message_id,
            'message': self.message,
            'classname': self.classname,
            'site': site_to_dict(self.site),
        }


class NegativeArbitraryValuesRule:
    """
    Entry points called by the parsers for every candidate site.

    Options, separator and compiled pattern are fixed when the rule is
    created and shared by all the sites of a run.
    """

    def __init__(self,
                 options: Union[RuleOptions, Dict[str, Any], None] = None,
                 settings: Optional[Dict[str, Any]] = None,
                 report: Optional[Callable[[Diagnostic], None]] = None,
                 config_reader: Optional[TailwindConfigReader] = None):
        if not isinstance(options, RuleOptions):
            options = resolve_options(options, settings)
        self.options = options
        self.callees = frozenset(options.callees)
        self.tags = frozenset(options.tags)
        self.class_regex = re.compile(options.class_regex)
        self.config_reader = config_reader or TailwindConfigReader()
        self.separator = self.config_reader.get_separator(options.config)
        self.classifier = NegativeArbitraryClassifier(self.separator)
        self.report = report
        self.visitors = {
            AttributeSite: self.visit_attribute,
            CallSite: self.visit_call,
            TaggedTemplateSite: self.visit_tagged_template,
        }
        logger.debug(f"Rule ready: separator={self.separator!r} callees={sorted(self.callees)} tags={sorted(self.tags)}")

    def visit(self, site) -> List[Diagnostic]:
        visitor = self.visitors.get(type(site))
        if visitor is None:
            return []
        return visitor(site)

    def is_valid_attribute(self, site: AttributeSite) -> bool:
        if not site.name or not self.class_regex.search(site.name):
            return False
        if not isinstance(site.value, StringLiteral):
            return False
        if site.in_expression_container:
            return True
        return not TEMPLATE_SYNTAX.search(site.value.value)

    def visit_attribute(self, site: AttributeSite) -> List[Diagnostic]:
        if not self.is_valid_attribute(site):
            return []
        return self.check(site)

    def visit_call(self, site: CallSite) -> List[Diagnostic]:
        if site.callee not in self.callees:
            return []
        diagnostics = []
        for argument in site.arguments:
            diagnostics.extend(self.check(site, argument))
        return diagnostics

    def visit_tagged_template(self, site: TaggedTemplateSite) -> List[Diagnostic]:
        if site.tag not in self.tags:
            return []
        return self.check(site, site.quasi)

    def check(self, site, node: Optional[ExpressionNode] = None) -> List[Diagnostic]:
        """Extract, split and classify the values of one site, reporting every match."""
        diagnostics = []
        for raw in extract(site, node):
            class_names = split_class_names(raw.text, raw.must_trim)
            for class_name in self.classifier.classify(class_names):
                diagnostic = Diagnostic(site, class_name)
                diagnostics.append(diagnostic)
                if self.report is not None:
                    self.report(diagnostic)
        return diagnostics
