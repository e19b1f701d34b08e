"""
Negative Arbitrary Classifier Module
Detects dash prefixed Tailwind classes that also carry an arbitrary value.
"""

import re
from typing import Iterable, List

from .class_tokens import get_suffix
from .prefix_catalog import PREFIX_PATTERN


class NegativeArbitraryClassifier:
    """Matches class names like `-top-[1px]` or `md:-mx-[3rem]`."""

    def __init__(self, separator: str = ':', pattern: re.Pattern = PREFIX_PATTERN):
        self.separator = separator
        self.pattern = pattern

    def is_negative_arbitrary(self, class_name: str) -> bool:
        suffix = get_suffix(class_name, self.separator)
        return self.pattern.match(suffix) is not None

    def classify(self, class_names: Iterable[str]) -> List[str]:
        """Return the offending class names in their original order."""
        return [cls for cls in class_names if self.is_negative_arbitrary(cls)]
