"""Shared constants for humanphrase.

Constants are grouped by domain:
- Template syntax: delimiter and segment arity
- Time units: milliseconds per unit used by the relative time classifier
- Cache limits: memory bounds for caching subsystems
- Locale defaults

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "TEMPLATE_DELIMITER",
    "TEMPLATE_SEGMENT_COUNTS",
    # Time units
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MS_PER_WEEK",
    "MS_PER_MONTH",
    "MS_PER_YEAR",
    "MS_PER_DECADE",
    "MS_PER_CENTURY",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "TEMPLATE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_FORMAT_LOCALE",
    "LOCALE_ENV_VAR",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Separator between phrase variants: "one thing::{0} things"
TEMPLATE_DELIMITER: str = "::"

# Accepted segment counts for a raw template:
#   2 -> (one, many)
#   3 -> (none, one, many)
#   4 -> (wrapper, none, one, many)
TEMPLATE_SEGMENT_COUNTS: frozenset[int] = frozenset({2, 3, 4})

# ============================================================================
# TIME UNITS (milliseconds)
# ============================================================================

MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR
MS_PER_WEEK: int = 7 * MS_PER_DAY

# Mean Gregorian month (365.2422 / 12 days), truncated to whole milliseconds.
MS_PER_MONTH: int = 2_629_743_830
MS_PER_YEAR: int = 12 * MS_PER_MONTH

# Decade length carries the extra precision of the tropical year.
MS_PER_DECADE: int = 315_569_259_747
MS_PER_CENTURY: int = 10 * MS_PER_DECADE

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum memoized parse_template() results.
# Relative time phrases of all built-in locales fit comfortably.
TEMPLATE_CACHE_SIZE: int = 512

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Default locale of the built-in registry.
DEFAULT_LOCALE: str = "en"

# Locale used by LocaleContext when Babel does not know the requested one.
FALLBACK_FORMAT_LOCALE: str = "en_US"

# Environment variable consulted by LocaleRegistry.from_environment().
LOCALE_ENV_VAR: str = "HUMANPHRASE_LOCALE"
