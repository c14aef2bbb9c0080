"""Locale runtime package.

Provides the locale formatting collaborator (numbers, dates) and the
plural rule table.

Python 3.11+. Depends on Babel for CLDR data.
"""

from .locale_context import LocaleContext
from .plural_rules import (
    Magnitude,
    PluralRule,
    cldr_plural_rule,
    default_plural_rule,
    french_plural_rule,
    select_category,
)

__all__ = [
    "LocaleContext",
    "Magnitude",
    "PluralRule",
    "cldr_plural_rule",
    "default_plural_rule",
    "french_plural_rule",
    "select_category",
]
