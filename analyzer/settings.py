"""
Settings Module
Rule options schema and their resolution against shared Tailwind settings.
"""

import re
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tailwind.config_reader import DEFAULT_CONFIG_PATH

DEFAULT_CALLEES = ['classnames', 'clsx', 'ctl', 'cva', 'tv']
DEFAULT_CONFIG = DEFAULT_CONFIG_PATH
DEFAULT_CLASS_REGEX = '^class(Name)?$'

OPTION_NAMES = ('callees', 'tags', 'config', 'classRegex')


class InvalidOptionsError(ValueError):
    """Raised when rule options do not match the schema."""


class RuleOptions(BaseModel):
    """Options accepted by the negative arbitrary values rule."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    callees: List[str] = Field(default_factory=lambda: list(DEFAULT_CALLEES),
                               description="Function names whose arguments hold class names")
    tags: List[str] = Field(default_factory=list,
                            description="Template tags whose bodies hold class names")
    config: Union[str, Dict[str, Any]] = Field(DEFAULT_CONFIG,
                                               description="Path to tailwind.config.js or an inline config")
    class_regex: str = Field(DEFAULT_CLASS_REGEX, alias='classRegex',
                             description="Pattern matching class attribute names")

    @field_validator('callees', 'tags')
    @classmethod
    def validate_unique(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("Items must be unique")
        return v

    @field_validator('class_regex')
    @classmethod
    def validate_regex(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression: {e}") from e
        return v


def resolve_options(options: Optional[Dict[str, Any]] = None,
                    settings: Optional[Dict[str, Any]] = None) -> RuleOptions:
    """
    Merge rule options over the shared `tailwindcss` settings, then defaults.

    Each option is looked up in the rule options first, then in
    `settings['tailwindcss']`; missing ones keep their default.
    """
    options = options or {}
    shared = (settings or {}).get('tailwindcss') or {}
    merged = {}
    for name in OPTION_NAMES:
        if name in options:
            merged[name] = options[name]
        elif name in shared:
            merged[name] = shared[name]
    try:
        return RuleOptions.model_validate(merged)
    except ValidationError as e:
        raise InvalidOptionsError(str(e)) from e
