"""
Class Tokens Module
Splits class attribute strings into individual Tailwind class names.
"""

import re
from typing import List, Optional

WHITESPACE_RUN = re.compile(r'[\t\n\f\r ]+')


def split_class_names(value: Optional[str], trim: bool = False) -> List[str]:
    """Split a class string on whitespace runs, keeping source order."""
    if not isinstance(value, str):
        return []
    if trim:
        value = value.strip()
    return [cls for cls in WHITESPACE_RUN.split(value) if cls]


def get_suffix(class_name: str, separator: str = ':') -> str:
    """Return the utility part of a class name, without variant prefixes."""
    if not separator:
        return class_name
    # md:hover:-top-[1px] -> -top-[1px]
    return class_name.rsplit(separator, 1)[-1]
