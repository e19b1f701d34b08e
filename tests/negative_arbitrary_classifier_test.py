import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from tailwind.class_tokens import split_class_names, get_suffix
from tailwind.negative_arbitrary_classifier import NegativeArbitraryClassifier
from tailwind.prefix_catalog import PREFIX_PATTERN, build_prefix_pattern

NEGATIVE_ARBITRARY_CLASSES = [
    '-inset-[1px]',
    '-inset-x-[1px]',
    '-inset-y-[1px]',
    '-scale-[1.2]',
    '-scale-x-[1.2]',
    '-top-[1px]',
    '-right-[1px]',
    '-bottom-[1px]',
    '-left-[1px]',
    '-z-[2]',
    '-order-[3]',
    '-m-[1px]',
    '-mx-[1px]',
    '-my-[1px]',
    '-mt-[1px]',
    '-mr-[1px]',
    '-mb-[1px]',
    '-ml-[1px]',
    '-scroll-m-[1px]',
    '-scroll-mb-[1px]',
    '-skew-x-[3deg]',
    '-skew-y-[3deg]',
    '-space-x-[1px]',
    '-space-y-[1px]',
    '-translate-x-[1px]',
    '-translate-y-[50%]',
    '-rotate-[45deg]',
    '-tracking-[0.1em]',
    '-indent-[2ch]',
    '-hue-rotate-[30deg]',
    '-backdrop-hue-rotate-[30deg]',
]

VALID_CLASSES = [
    'top-[1px]',
    '-top',
    '-top-1',
    '-foo-[1px]',
    '-p-[1px]',
    '-skew-[3deg]',
    '-space-[1px]',
    '-mz-[1px]',
    '-top-[]',
    '-top-[1px]x',
    'x-top-[1px]',
    'md:top-[1px]',
    'p-2',
]


@pytest.mark.parametrize('class_name', NEGATIVE_ARBITRARY_CLASSES)
def test_catalog_families_match(class_name):
    classifier = NegativeArbitraryClassifier()
    assert classifier.classify([class_name]) == [class_name]


@pytest.mark.parametrize('class_name', VALID_CLASSES)
def test_valid_classes_never_match(class_name):
    classifier = NegativeArbitraryClassifier()
    assert classifier.classify([class_name]) == []


def test_pattern_is_case_insensitive():
    assert PREFIX_PATTERN.match('-TOP-[1PX]')
    assert PREFIX_PATTERN.match('-Translate-X-[1px]')


def test_build_prefix_pattern_with_custom_families():
    pattern = build_prefix_pattern(('top',))
    assert pattern.match('-top-[1px]')
    assert not pattern.match('-z-[1]')


def test_variant_prefix_is_stripped():
    classifier = NegativeArbitraryClassifier(':')
    assert classifier.classify(['md:-top-[1px]']) == ['md:-top-[1px]']
    assert classifier.classify(['md:hover:-mx-[2px]']) == ['md:hover:-mx-[2px]']
    assert classifier.classify(['-md:top-[1px]']) == []


def test_custom_separator():
    classifier = NegativeArbitraryClassifier('_')
    assert classifier.classify(['md_-top-[1px]']) == ['md_-top-[1px]']
    # ':' is no longer a separator, so the suffix keeps the variant
    assert classifier.classify(['md:-top-[1px]']) == []


def test_classification_keeps_order_and_duplicates():
    classifier = NegativeArbitraryClassifier()
    tokens = split_class_names('a -top-[1px] b -z-[2] -top-[1px]', True)
    assert classifier.classify(tokens) == ['-top-[1px]', '-z-[2]', '-top-[1px]']


def test_split_class_names():
    assert split_class_names('  foo   bar\n   baz\tqux  ', True) == ['foo', 'bar', 'baz', 'qux']
    assert split_class_names(' foo ', False) == ['foo']
    assert split_class_names('', True) == []
    assert split_class_names('   ', False) == []
    assert split_class_names(None, True) == []


def test_split_does_not_use_separator():
    assert split_class_names('md:p-2 lg:-top-[1px]', True) == ['md:p-2', 'lg:-top-[1px]']


def test_get_suffix():
    assert get_suffix('md:hover:-top-[1px]', ':') == '-top-[1px]'
    assert get_suffix('-top-[1px]', ':') == '-top-[1px]'
    assert get_suffix('md:-top-[1px]', '') == 'md:-top-[1px]'
