"""
Value Extractor Module
Collects every string that may hold class names below an expression node.
"""

from typing import List, NamedTuple, Optional

from .nodes import (
    ArrayLiteral,
    AttributeSite,
    Conditional,
    ExpressionNode,
    ObjectLiteral,
    Property,
    ShortCircuit,
    SpreadElement,
    StringLiteral,
    TemplateElement,
    TemplateString,
)


class RawValue(NamedTuple):
    text: str
    must_trim: bool


def extract_site_value(site) -> List[RawValue]:
    """Literal value of an attribute site, or nothing for other sites."""
    if isinstance(site, AttributeSite) and isinstance(site.value, StringLiteral):
        return [RawValue(site.value.value, True)]
    return []


def extract(site, node: Optional[ExpressionNode] = None) -> List[RawValue]:
    """
    Walk `node` and return the class-bearing strings it contains, in source order.

    Called with `node=None`, the site's own attribute value is the only source.
    Template pieces keep their boundary whitespace; string literals are trimmed.
    Object literals only contribute their keys (`{'-top-[1px]': isOpen}`), the
    values being the conditions. Unknown shapes contribute nothing.
    """
    if node is None:
        return extract_site_value(site)
    return _extract_node(node)


def _extract_node(node: Optional[ExpressionNode]) -> List[RawValue]:
    if isinstance(node, TemplateString):
        values = []
        for expression in node.expressions:
            values.extend(_extract_node(expression))
        for quasi in node.quasis:
            values.extend(_extract_node(quasi))
        return values
    if isinstance(node, Conditional):
        return _extract_node(node.consequent) + _extract_node(node.alternate)
    if isinstance(node, ShortCircuit):
        return _extract_node(node.right)
    if isinstance(node, ArrayLiteral):
        values = []
        for element in node.elements:
            values.extend(_extract_node(element))
        return values
    if isinstance(node, ObjectLiteral):
        values = []
        for prop in node.properties:
            if isinstance(prop, SpreadElement):
                values.extend(_extract_node(prop.argument))
            elif isinstance(prop, Property):
                values.extend(_extract_node(prop.key))
        return values
    if isinstance(node, SpreadElement):
        return _extract_node(node.argument)
    if isinstance(node, StringLiteral):
        return [RawValue(node.value, True)]
    if isinstance(node, TemplateElement):
        return [RawValue(node.raw, False)]
    return []
