"""Plural template engine package.

Parses delimited templates into phrase variants, selects a variant for a
magnitude under a locale's plural rule and substitutes positional markers.

Python 3.11+.
"""

from .parser import Template, parse_template
from .renderer import PluralRenderer, build_plural_template, pluralize
from .substitution import find_markers, substitute

__all__ = [
    "PluralRenderer",
    "Template",
    "build_plural_template",
    "find_markers",
    "parse_template",
    "pluralize",
    "substitute",
]
