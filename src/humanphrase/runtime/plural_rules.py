"""Plural rule table and category selection.

A plural rule is a pure, total function mapping a magnitude to a Category.
The table is deliberately small:

    default_plural_rule  - 0 -> NONE, exactly 1 -> ONE, everything else -> MANY
    french_plural_rule   - 0 -> NONE, 0 < n < 2 -> ONE, everything else -> MANY
    cldr_plural_rule()   - ONE wherever Babel's CLDR data says "one"

Rules are installed per locale in a LocaleRegistry; select_category()
resolves the rule for a locale and applies it. Unknown locales use the
default rule and never raise.

Python 3.11+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from humanphrase.diagnostics import ErrorTemplate
from humanphrase.enums import Category
from humanphrase.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from humanphrase.registry import LocaleRegistry

__all__ = [
    "Magnitude",
    "PluralRule",
    "cldr_plural_rule",
    "default_plural_rule",
    "ensure_magnitude",
    "french_plural_rule",
    "select_category",
]

logger = logging.getLogger(__name__)

Magnitude = int | float | Decimal
PluralRule = Callable[[Magnitude], Category]


def ensure_magnitude(value: object) -> Magnitude:
    """Validate that a value can be used as a magnitude.

    Raises:
        TypeError: If value is not int, float or Decimal (bool is rejected)
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise TypeError(ErrorTemplate.invalid_magnitude(value).message)
    return value


def _is_finite(n: Magnitude) -> bool:
    """NaN and infinities are not countable; every rule maps them to MANY."""
    if isinstance(n, Decimal):
        return n.is_finite()
    return isinstance(n, int) or math.isfinite(n)


def default_plural_rule(n: Magnitude) -> Category:
    """Two-bucket "one / other" rule with a dedicated zero bucket.

    Comparison is by exact value including sign and fraction: 1.0 and
    Decimal("1.00") are ONE, while -1, 1.5 and NaN are MANY.

    Examples:
        >>> default_plural_rule(0)
        <Category.NONE: 'none'>
        >>> default_plural_rule(1.0)
        <Category.ONE: 'one'>
        >>> default_plural_rule(-1)
        <Category.MANY: 'many'>
    """
    if not _is_finite(n):
        return Category.MANY
    if n == 0:
        return Category.NONE
    if n == 1:
        return Category.ONE
    return Category.MANY


def french_plural_rule(n: Magnitude) -> Category:
    """Three-bucket rule where every magnitude below two is singular.

    CLDR French puts 0 and 1 in "one" (i = 0,1), so 1.5 is singular.
    Zero keeps its own bucket so templates can say "aucun fichier".
    """
    if not _is_finite(n):
        return Category.MANY
    if n == 0:
        return Category.NONE
    if 0 < n < 2:
        return Category.ONE
    return Category.MANY


def cldr_plural_rule(locale_code: str) -> PluralRule:
    """Build a rule from Babel's CLDR plural data for a locale.

    Zero maps to NONE and negative magnitudes to MANY, as in the default
    rule; for positive magnitudes the CLDR "one" category maps to ONE and
    every other CLDR category (two, few, many, other) to MANY. Integral
    floats and Decimals are treated as integers so that 1.0 and
    Decimal("1.00") count as "one". NaN and infinities are MANY.

    Falls back to default_plural_rule (with a logged warning) when Babel
    does not know the locale.

    Args:
        locale_code: Locale code (e.g., "de", "ru_RU", "pt-BR")

    Returns:
        Plural rule for the locale
    """
    try:
        plural_form = get_babel_locale(locale_code).plural_form
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "No CLDR plural data for locale '%s': %s. Using default rule", locale_code, e
        )
        return default_plural_rule

    def rule(n: Magnitude) -> Category:
        if not _is_finite(n):
            return Category.MANY
        if n == 0:
            return Category.NONE
        if n < 0:
            return Category.MANY
        if isinstance(n, float) and n.is_integer():
            n = int(n)
        elif isinstance(n, Decimal) and n == n.to_integral_value():
            n = int(n)
        return Category.ONE if plural_form(n) == "one" else Category.MANY

    rule.__name__ = f"cldr_plural_rule_{locale_code}"
    return rule


def select_category(
    magnitude: Magnitude,
    locale: str | None = None,
    *,
    registry: LocaleRegistry | None = None,
) -> Category:
    """Select the plural category for a magnitude under a locale's rule.

    Args:
        magnitude: Number to categorize
        locale: Locale code; None uses the registry's default locale
        registry: Registry to consult; None uses the shared registry

    Returns:
        Category selected by the locale's rule (default rule if unregistered)

    Raises:
        TypeError: If magnitude is not a number

    Examples:
        >>> select_category(1)
        <Category.ONE: 'one'>
        >>> select_category(1.5, "fr")
        <Category.ONE: 'one'>
        >>> select_category(1, "xx-UNKNOWN")
        <Category.ONE: 'one'>
    """
    if registry is None:
        from humanphrase.registry import get_shared_registry  # noqa: PLC0415 - circular

        registry = get_shared_registry()
    return registry.plural_rule(locale)(ensure_magnitude(magnitude))
