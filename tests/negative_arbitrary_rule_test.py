import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from analyzer.negative_arbitrary_rule import Diagnostic, NegativeArbitraryValuesRule, RULE_ID
from analyzer.nodes import (
    AttributeSite,
    CallSite,
    OtherExpression,
    ShortCircuit,
    StringLiteral,
    TaggedTemplateSite,
    TemplateElement,
    TemplateString,
)
from analyzer.settings import DEFAULT_CALLEES, InvalidOptionsError, RuleOptions, resolve_options


def make_rule(**options):
    options.setdefault('config', {})
    return NegativeArbitraryValuesRule(options)


def test_attribute_violation_message():
    rule = make_rule()
    site = AttributeSite(name='className', value=StringLiteral('p-2 md:-top-[1px]'), line=3, column=4)
    diagnostics = rule.visit(site)
    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.classname == 'md:-top-[1px]'
    assert diagnostic.message == "Arbitrary value classname 'md:-top-[1px]' should not start with a dash (-)"
    assert diagnostic.rule_id == RULE_ID
    assert (diagnostic.line, diagnostic.column) == (3, 4)


def test_attribute_name_must_be_class():
    rule = make_rule()
    assert rule.visit(AttributeSite(name='id', value=StringLiteral('-top-[1px]'))) == []
    assert rule.visit(AttributeSite(name='classes', value=StringLiteral('-top-[1px]'))) == []
    assert len(rule.visit(AttributeSite(name='class', value=StringLiteral('-top-[1px]')))) == 1


def test_custom_class_regex():
    rule = make_rule(classRegex='^(class|tw)$')
    assert len(rule.visit(AttributeSite(name='tw', value=StringLiteral('-top-[1px]')))) == 1
    assert rule.visit(AttributeSite(name='className', value=StringLiteral('-top-[1px]'))) == []


def test_attribute_value_must_be_literal():
    rule = make_rule()
    template = TemplateString(quasis=(TemplateElement('-top-[1px]'),))
    assert rule.visit(AttributeSite(name='className', value=template, in_expression_container=True)) == []
    assert rule.visit(AttributeSite(name='className', value=OtherExpression('identifier'))) == []
    assert rule.visit(AttributeSite(name='className')) == []


def test_attribute_with_template_syntax_is_skipped():
    rule = make_rule()
    assert rule.visit(AttributeSite(name='class', value=StringLiteral('{{ cls }} -top-[1px]'))) == []
    assert rule.visit(AttributeSite(name='class', value=StringLiteral('a ? -top-[1px]'))) == []
    # braces are fine once the literal sits in an expression container
    site = AttributeSite(name='className', value=StringLiteral('-top-[1px] {x}'), in_expression_container=True)
    assert [d.classname for d in rule.visit(site)] == ['-top-[1px]']


def test_call_callee_allow_list():
    rule = make_rule()
    args = (StringLiteral('-top-[1px]'), ShortCircuit('&&', OtherExpression('identifier'), StringLiteral('-z-[2]')))
    assert [d.classname for d in rule.visit(CallSite(callee='clsx', arguments=args))] == ['-top-[1px]', '-z-[2]']
    assert rule.visit(CallSite(callee='foo', arguments=args)) == []
    assert rule.visit(CallSite(callee=None, arguments=args)) == []
    custom = make_rule(callees=['foo'])
    assert len(custom.visit(CallSite(callee='foo', arguments=args))) == 2
    assert custom.visit(CallSite(callee='clsx', arguments=args)) == []


def test_tagged_template_tag_allow_list():
    quasi = TemplateString(quasis=(TemplateElement(' -top-[1px] '),))
    site = TaggedTemplateSite(tag='tw', quasi=quasi)
    assert make_rule().visit(site) == []
    assert [d.classname for d in make_rule(tags=['tw']).visit(site)] == ['-top-[1px]']


def test_repeated_tokens_are_not_deduplicated():
    rule = make_rule()
    site = CallSite(callee='clsx', arguments=(StringLiteral('-top-[1px]'), StringLiteral('-top-[1px]')))
    diagnostics = rule.visit(site)
    assert len(diagnostics) == 2
    assert diagnostics[0] == diagnostics[1]


def test_report_sink_receives_diagnostics_in_order():
    reported = []
    rule = NegativeArbitraryValuesRule({'config': {}}, report=reported.append)
    site = CallSite(callee='clsx', arguments=(StringLiteral('a -top-[1px] b -z-[2]'),))
    rule.visit(site)
    assert [d.classname for d in reported] == ['-top-[1px]', '-z-[2]']
    assert all(isinstance(d, Diagnostic) for d in reported)


def test_visit_is_idempotent():
    rule = make_rule()
    site = CallSite(callee='cva', arguments=(StringLiteral('-top-[1px] -z-[2]'),))
    assert rule.visit(site) == rule.visit(site)


def test_separator_from_inline_config():
    rule = make_rule(config={'separator': '_'})
    assert rule.separator == '_'
    assert len(rule.visit(AttributeSite(name='class', value=StringLiteral('md_-top-[1px]')))) == 1
    assert rule.visit(AttributeSite(name='class', value=StringLiteral('md:-top-[1px]'))) == []


def test_unknown_site_is_ignored():
    assert make_rule().visit(object()) == []


def test_diagnostic_to_dict():
    site = CallSite(callee='clsx', line=2, column=6, file_path='a.jsx')
    data = Diagnostic(site, '-top-[1px]').to_dict()
    assert data['classname'] == '-top-[1px]'
    assert data['site'] == {'kind': 'call', 'name': 'clsx', 'file': 'a.jsx', 'line': 2, 'column': 6}


def test_default_options():
    options = resolve_options()
    assert options.callees == DEFAULT_CALLEES
    assert options.tags == []
    assert options.config == 'tailwind.config.js'
    assert options.class_regex == '^class(Name)?$'


def test_options_take_precedence_over_settings():
    settings = {'tailwindcss': {'callees': ['twMerge'], 'tags': ['tw'], 'config': {'separator': '_'}}}
    options = resolve_options({'callees': ['cn']}, settings)
    assert options.callees == ['cn']
    assert options.tags == ['tw']
    assert options.config == {'separator': '_'}


@pytest.mark.parametrize('options', [
    {'callees': ['a', 'a']},
    {'tags': 'tw'},
    {'callees': [1]},
    {'config': 3},
    {'classRegex': '('},
])
def test_invalid_options(options):
    with pytest.raises(InvalidOptionsError):
        resolve_options(options)


def test_rule_accepts_resolved_options():
    rule = NegativeArbitraryValuesRule(RuleOptions(callees=['cn'], config={}))
    assert rule.callees == frozenset({'cn'})
