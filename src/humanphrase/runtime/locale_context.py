"""Locale-bound number and date formatting for phrase markers.

A LocaleContext wraps a parsed Babel locale and renders the values bound to
``{i,number,...}`` and ``{i,date,...}`` markers. Contexts are immutable,
shared through a bounded LRU cache and safe to use from any thread; no
process-wide locale state is touched.

Python 3.11+. Uses Babel for CLDR data.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from humanphrase.constants import FALLBACK_FORMAT_LOCALE, MAX_LOCALE_CACHE_SIZE
from humanphrase.diagnostics import ErrorTemplate, FormattingError
from humanphrase.locale_utils import normalize_locale

__all__ = ["DATE_STYLES", "LocaleContext"]

logger = logging.getLogger(__name__)

DATE_STYLES = frozenset({"short", "medium", "long", "full"})

# Grouped integer part, up to three fraction digits
_DEFAULT_NUMBER_PATTERN = "#,##0.###"
_INTEGER_NUMBER_PATTERN = "#,##0"


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Formatting collaborators bound to one locale.

    Build instances with LocaleContext.create(), which caches them and
    never fails: locales Babel cannot parse are formatted as en_US and
    flagged with is_fallback.

    Attributes:
        locale_code: Locale code as requested by the caller
        babel_locale: Parsed Babel locale used for formatting
        is_fallback: True when babel_locale is the en_US substitute

    Examples:
        >>> LocaleContext.create("de-DE").format_number(1234.5)
        '1.234,5'
        >>> LocaleContext.create("xx-UNKNOWN").is_fallback
        True
    """

    _instances: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _lock: ClassVar[RLock] = RLock()

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Get the cached context for a locale, building it on first use.

        Args:
            locale_code: BCP-47 or POSIX locale code

        Returns:
            LocaleContext; same instance for equivalent codes while cached
        """
        key = normalize_locale(locale_code)
        with cls._lock:
            cached = cls._instances.get(key)
            if cached is not None:
                cls._instances.move_to_end(key)
                return cached

        context = cls._build(locale_code, key)

        with cls._lock:
            # Another thread may have stored the key while we were parsing
            cached = cls._instances.setdefault(key, context)
            while len(cls._instances) > MAX_LOCALE_CACHE_SIZE:
                cls._instances.popitem(last=False)
            return cached

    @classmethod
    def _build(cls, locale_code: str, key: str) -> "LocaleContext":
        try:
            return cls(locale_code=locale_code, babel_locale=Locale.parse(key))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Cannot format for locale '%s' (%s); using %s",
                locale_code, e, FALLBACK_FORMAT_LOCALE,
            )
        fallback = Locale.parse(FALLBACK_FORMAT_LOCALE)
        return cls(locale_code=locale_code, babel_locale=fallback, is_fallback=True)

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached context."""
        with cls._lock:
            cls._instances.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Number of cached contexts."""
        with cls._lock:
            return len(cls._instances)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Cache statistics: size, max_size and cached locale keys (oldest first)."""
        with cls._lock:
            return {
                "size": len(cls._instances),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._instances),
            }

    def format_number(self, value: int | float | Decimal, style: str | None = None) -> str:
        """Render a number with the locale's separators.

        Args:
            value: Number to render
            style: None for grouping with up to three fraction digits,
                "integer" to round to a whole number, otherwise a Babel
                number pattern such as "#,##0.00"

        Returns:
            Localized number

        Raises:
            FormattingError: If Babel rejects the value or the pattern;
                fallback_value is str(value)

        Examples:
            >>> LocaleContext.create("es").format_number(2000000)
            '2.000.000'
            >>> LocaleContext.create("en").format_number(2.6, "integer")
            '3'
        """
        if not style:
            pattern = _DEFAULT_NUMBER_PATTERN
        elif style == "integer":
            pattern = _INTEGER_NUMBER_PATTERN
        else:
            pattern = style
        try:
            return babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale)
        except (ValueError, TypeError, InvalidOperation, KeyError, OverflowError) as e:
            diagnostic = ErrorTemplate.number_formatting_failed(value, self.locale_code, str(e))
            raise FormattingError(diagnostic, fallback_value=str(value)) from e

    def format_date(self, value: date, style: str | None = None) -> str:
        """Render a date or datetime in a CLDR style or a Babel pattern.

        Only the calendar date is rendered for a named style; a pattern may
        include time fields.

        Args:
            value: date or datetime
            style: None for "medium", one of short/medium/long/full, or a
                Babel datetime pattern such as "yyyy-MM-dd"

        Returns:
            Localized date

        Raises:
            FormattingError: If Babel rejects the value or the pattern;
                fallback_value is the ISO 8601 form

        Examples:
            >>> LocaleContext.create("en").format_date(date(2015, 12, 7), "short")
            '12/7/15'
            >>> LocaleContext.create("es").format_date(date(2015, 12, 7), "short")
            '7/12/15'
        """
        style = style or "medium"
        try:
            if style in DATE_STYLES:
                return babel_dates.format_date(value, format=style, locale=self.babel_locale)
            return babel_dates.format_datetime(value, format=style, locale=self.babel_locale)
        except (ValueError, TypeError, AttributeError, KeyError, OverflowError) as e:
            diagnostic = ErrorTemplate.date_formatting_failed(value, self.locale_code, str(e))
            raise FormattingError(diagnostic, fallback_value=value.isoformat()) from e
