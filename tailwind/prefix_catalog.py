"""
Prefix Catalog Module
Property families that accept a negative scale value in Tailwind CSS.
"""

import re
from typing import Tuple

# Order matters only for readability of the compiled alternation.
PREFIX_FAMILIES: Tuple[str, ...] = (
    r'(inset|scale)(-(y|x))?',
    r'top',
    r'right',
    r'bottom',
    r'left',
    r'z',
    r'order',
    r'(scroll-)?m(y|x|t|r|l|b)?',
    r'(skew|space|translate)-(y|x)',
    r'rotate',
    r'tracking',
    r'indent',
    r'(backdrop-)?hue-rotate',
)


def build_prefix_pattern(families: Tuple[str, ...] = PREFIX_FAMILIES) -> re.Pattern:
    """Compile the `-<family>-[<value>]` pattern for the given families."""
    alternation = '|'.join(families)
    return re.compile(rf'^-({alternation})-\[.+\]$', re.IGNORECASE)


PREFIX_PATTERN = build_prefix_pattern()
