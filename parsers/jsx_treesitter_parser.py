"""
JSX Tree-sitter Parser Module
Parses JS/JSX/TS/TSX sources with tree-sitter and emits the sites that may carry class names.
"""

import html
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser

from analyzer.nodes import (
    ArrayLiteral,
    AttributeSite,
    CallSite,
    Conditional,
    ExpressionNode,
    ObjectLiteral,
    OtherExpression,
    Property,
    ShortCircuit,
    Site,
    SpreadElement,
    StringLiteral,
    TaggedTemplateSite,
    TemplateElement,
    TemplateString,
)

logger = logging.getLogger(__name__)

TS_LANGUAGE = Language(ts_typescript.language_typescript())
TSX_LANGUAGE = Language(ts_typescript.language_tsx())

PARSERS: Dict[str, Parser] = {
    # the TSX grammar also covers plain JavaScript and accepts every JSX attribute name
    '.js': Parser(TSX_LANGUAGE),
    '.jsx': Parser(TSX_LANGUAGE),
    '.mjs': Parser(TSX_LANGUAGE),
    '.cjs': Parser(TSX_LANGUAGE),
    '.ts': Parser(TS_LANGUAGE),
    '.mts': Parser(TS_LANGUAGE),
    '.cts': Parser(TS_LANGUAGE),
    '.tsx': Parser(TSX_LANGUAGE),
}

SCRIPT_EXTENSIONS = frozenset(PARSERS)

SHORT_CIRCUIT_OPERATORS = frozenset({'&&', '||', '??'})

JS_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', 'f': '\f', 'v': '\v', 'b': '\b', '0': '\0'}


def get_parser(extension: str) -> Parser:
    """Parser for a file extension, JavaScript (with JSX) by default."""
    return PARSERS.get(extension.lower(), PARSERS['.jsx'])


def unescape_js(sequence: str) -> str:
    """Cook a single JavaScript escape sequence such as `\\n` or `\\u0041`."""
    body = sequence[1:]
    try:
        if body in JS_ESCAPES:
            return JS_ESCAPES[body]
        if body.startswith('u{'):
            return chr(int(body[2:-1], 16))
        if body[:1] in ('u', 'x') and len(body) > 1:
            return chr(int(body[1:], 16))
    except ValueError:
        return sequence
    if body[:1] in ('\n', '\r', '\u2028', '\u2029'):
        # line continuation
        return ''
    return body


def parse_script(code: str, extension: str = '.jsx', file_path: Optional[str] = None,
                 line_offset: int = 0) -> List[Site]:
    """Parse script source and return its extraction sites in document order."""
    source = bytes(code, 'utf-8')
    tree = get_parser(extension).parse(source)
    root_node = tree.root_node
    if root_node.has_error:
        logger.warning(f"Syntax errors in {file_path or 'source'}, sites may be partial")

    def text_of(node: Node) -> str:
        return source[node.start_byte:node.end_byte].decode('utf-8', errors='replace')

    def named_children(node: Node) -> List[Node]:
        return [child for child in node.named_children if child.type != 'comment']

    def first_named(node: Node) -> Optional[Node]:
        children = named_children(node)
        return children[0] if children else None

    def identifier_name(node: Optional[Node]) -> Optional[str]:
        if node is not None and node.type == 'identifier':
            return text_of(node)
        return None

    def string_value(node: Node) -> str:
        parts = []
        for child in node.named_children:
            text = text_of(child)
            if child.type == 'escape_sequence':
                text = unescape_js(text)
            elif child.type == 'html_character_reference':
                text = html.unescape(text)
            parts.append(text)
        return ''.join(parts)

    def template_string(node: Node) -> TemplateString:
        expressions = []
        quasis = []
        # pieces are the raw text between the backticks and the ${...} substitutions
        start = node.start_byte + 1
        for child in node.named_children:
            if child.type != 'template_substitution':
                continue
            quasis.append(TemplateElement(source[start:child.start_byte].decode('utf-8', errors='replace')))
            expressions.append(to_expression(first_named(child)))
            start = child.end_byte
        quasis.append(TemplateElement(source[start:node.end_byte - 1].decode('utf-8', errors='replace')))
        return TemplateString(tuple(expressions), tuple(quasis))

    def property_key(node: Optional[Node]) -> ExpressionNode:
        if node is not None and node.type == 'computed_property_name':
            return to_expression(first_named(node))
        return to_expression(node)

    def object_member(node: Node) -> ExpressionNode:
        if node.type == 'spread_element':
            return SpreadElement(to_expression(first_named(node)))
        if node.type == 'pair':
            return Property(property_key(node.child_by_field_name('key')),
                            to_expression(node.child_by_field_name('value')))
        if node.type == 'method_definition':
            return Property(property_key(node.child_by_field_name('name')))
        # shorthand properties: {isOpen}
        return Property(OtherExpression(node.type, text_of(node)))

    def to_expression(node: Optional[Node]) -> ExpressionNode:
        if node is None:
            return OtherExpression('missing')
        node_type = node.type
        if node_type == 'string':
            return StringLiteral(string_value(node))
        if node_type == 'template_string':
            return template_string(node)
        if node_type == 'ternary_expression':
            return Conditional(to_expression(node.child_by_field_name('consequence')),
                               to_expression(node.child_by_field_name('alternative')))
        if node_type == 'binary_expression':
            operator = node.child_by_field_name('operator')
            if operator is not None and operator.type in SHORT_CIRCUIT_OPERATORS:
                return ShortCircuit(operator.type,
                                    to_expression(node.child_by_field_name('left')),
                                    to_expression(node.child_by_field_name('right')))
        if node_type == 'array':
            return ArrayLiteral(tuple(to_expression(child) for child in named_children(node)))
        if node_type == 'object':
            return ObjectLiteral(tuple(object_member(child) for child in named_children(node)))
        if node_type == 'spread_element':
            return SpreadElement(to_expression(first_named(node)))
        if node_type == 'parenthesized_expression':
            return to_expression(first_named(node))
        return OtherExpression(node_type, text_of(node))

    def location(node: Node) -> Dict[str, Union[int, Optional[str]]]:
        row, byte_column = node.start_point
        # start_point counts bytes, sites count characters
        line_start = node.start_byte - byte_column
        return {
            'line': row + 1 + line_offset,
            'column': len(source[line_start:node.start_byte].decode('utf-8', errors='replace')),
            'file_path': file_path,
        }

    def jsx_attribute_site(node: Node) -> AttributeSite:
        children = node.children
        name = text_of(children[0]) if children else ''
        value_node = children[2] if len(children) >= 3 and children[1].type == '=' else None
        if value_node is None:
            return AttributeSite(name=name, **location(node))
        if value_node.type == 'jsx_expression':
            return AttributeSite(name=name, value=to_expression(first_named(value_node)),
                                 in_expression_container=True, **location(node))
        return AttributeSite(name=name, value=to_expression(value_node), **location(node))

    def call_site(node: Node) -> Site:
        function = node.child_by_field_name('function')
        arguments = node.child_by_field_name('arguments')
        if arguments is not None and arguments.type == 'template_string':
            return TaggedTemplateSite(tag=identifier_name(function), quasi=template_string(arguments),
                                      **location(node))
        args = tuple(to_expression(arg) for arg in named_children(arguments)) if arguments is not None else ()
        return CallSite(callee=identifier_name(function), arguments=args, **location(node))

    sites: List[Site] = []
    # explicit stack keeps deep files clear of the recursion limit
    stack = [root_node]
    while stack:
        node = stack.pop()
        if node.type == 'jsx_attribute':
            sites.append(jsx_attribute_site(node))
        elif node.type == 'call_expression':
            sites.append(call_site(node))
        stack.extend(reversed(node.children))
    logger.debug(f"Found {len(sites)} candidate sites in {file_path or 'source'}")
    return sites


def parse_jsx_with_treesitter(file_path: Union[str, Path]) -> List[Site]:
    """Parse a JS/JSX/TS/TSX file and return its extraction sites."""
    path = Path(file_path)
    with open(path, 'r', encoding='utf-8') as f:
        code = f.read()
    return parse_script(code, path.suffix, file_path=str(path))
