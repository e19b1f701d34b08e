"""
Expression Nodes Module
Immutable expression shapes and extraction sites handed to the rule by the parsers.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


class ExpressionNode:
    """Base class for every expression shape the extractor understands."""


@dataclass(frozen=True)
class StringLiteral(ExpressionNode):
    value: str


@dataclass(frozen=True)
class TemplateElement(ExpressionNode):
    """Raw text between the interpolations of a template string."""
    raw: str


@dataclass(frozen=True)
class TemplateString(ExpressionNode):
    expressions: Tuple[ExpressionNode, ...] = ()
    quasis: Tuple[TemplateElement, ...] = ()


@dataclass(frozen=True)
class Conditional(ExpressionNode):
    consequent: ExpressionNode
    alternate: ExpressionNode


@dataclass(frozen=True)
class ShortCircuit(ExpressionNode):
    operator: str
    left: ExpressionNode
    right: ExpressionNode


@dataclass(frozen=True)
class ArrayLiteral(ExpressionNode):
    elements: Tuple[ExpressionNode, ...] = ()


@dataclass(frozen=True)
class Property(ExpressionNode):
    key: ExpressionNode
    value: Optional[ExpressionNode] = None


@dataclass(frozen=True)
class SpreadElement(ExpressionNode):
    argument: ExpressionNode


@dataclass(frozen=True)
class ObjectLiteral(ExpressionNode):
    properties: Tuple[ExpressionNode, ...] = ()


@dataclass(frozen=True)
class OtherExpression(ExpressionNode):
    """Any shape that never carries class names (identifiers, calls, numbers...)."""
    kind: str = 'unknown'
    text: str = ''


@dataclass(frozen=True)
class Site:
    line: int = 1
    column: int = 0
    file_path: Optional[str] = None


@dataclass(frozen=True)
class AttributeSite(Site):
    """A markup or JSX attribute such as `class="..."` or `className={'...'}`."""
    name: str = ''
    value: Optional[ExpressionNode] = None
    in_expression_container: bool = False


@dataclass(frozen=True)
class CallSite(Site):
    callee: Optional[str] = None
    arguments: Tuple[ExpressionNode, ...] = ()


@dataclass(frozen=True)
class TaggedTemplateSite(Site):
    tag: Optional[str] = None
    quasi: Optional[TemplateString] = None


ExtractionSite = Union[AttributeSite, CallSite, TaggedTemplateSite]


def site_to_dict(site: Site) -> Dict[str, Any]:
    """Flat, JSON friendly description of a site."""
    if isinstance(site, AttributeSite):
        kind, name = 'attribute', site.name
    elif isinstance(site, CallSite):
        kind, name = 'call', site.callee
    elif isinstance(site, TaggedTemplateSite):
        kind, name = 'tagged_template', site.tag
    else:
        kind, name = 'unknown', None
    return {
        'kind': kind,
        'name': name,
        'file': site.file_path,
        'line': site.line,
        'column': site.column,
    }
