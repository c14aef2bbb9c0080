"""Placeholder substitution for phrase variants.

Marker grammar:
    {i}                 positional argument i
    {i,number}          number with locale grouping and separators
    {i,number,integer}  number rounded to an integer
    {i,number,PATTERN}  number through a Babel number pattern ("#,##0.00")
    {i,date}            date/datetime in the locale's medium style
    {i,date,STYLE}      STYLE is short, medium, long or full
    {i,date,PATTERN}    date/datetime through a Babel datetime pattern

{0} is the magnitude; {i} for i >= 1 is the (i-1)th extra argument.
Numbers are always rendered through the locale number formatter, dates
through the locale date formatter, anything else via str(). Braces that do
not match the grammar pass through unchanged.

Python 3.11+. Uses Babel (via LocaleContext) for formatting.
"""

import logging
import re
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from humanphrase.diagnostics import ErrorTemplate, FormattingError, MissingArgumentError
from humanphrase.runtime.locale_context import LocaleContext
from humanphrase.runtime.plural_rules import Magnitude

__all__ = ["find_markers", "substitute"]

logger = logging.getLogger(__name__)

_MARKER = re.compile(r"\{(\d+)(?:\s*,\s*(number|date)\s*(?:,\s*([^{}]*?)\s*)?)?\}")


def find_markers(phrase: str) -> tuple[int, ...]:
    """Marker indexes referenced by a phrase, left to right.

    Example:
        >>> find_markers("There {0} on {1}, {1,number}")
        (0, 1, 1)
    """
    return tuple(int(match.group(1)) for match in _MARKER.finditer(phrase))


def _is_number(value: object) -> bool:
    return not isinstance(value, bool) and isinstance(value, int | float | Decimal)


def _render_value(ctx: LocaleContext, value: object, kind: str | None, style: str | None) -> str:
    try:
        if _is_number(value) and kind != "date":
            return ctx.format_number(value, style)  # type: ignore[arg-type]
        if isinstance(value, date) and kind != "number":
            return ctx.format_date(value, style)
    except FormattingError as e:
        logger.warning("Using fallback '%s': %s", e.fallback_value, e)
        return e.fallback_value
    return str(value)


def substitute(
    phrase: str,
    magnitude: Magnitude,
    extra_args: Sequence[object],
    locale_code: str,
    *,
    primary: str | None = None,
) -> str:
    """Replace positional markers in a phrase.

    Unused arguments are ignored: phrase variants of one template consume
    different subsets of the caller's arguments.

    Args:
        phrase: Phrase containing markers
        magnitude: Value bound to {0}
        extra_args: Values bound to {1}, {2}, ...
        locale_code: Locale for number and date formatting
        primary: Literal text bound to {0} instead of the magnitude (used
            when rendering a wrapper phrase around the chosen variant)

    Returns:
        Phrase with every marker replaced

    Raises:
        MissingArgumentError: If a marker index exceeds the supplied arguments

    Examples:
        >>> substitute("{0} files on {1}", 1200, ["disk"], "en")
        '1,200 files on disk'
        >>> substitute("Hay {0,number} ficheros", 2000000, [], "es")
        'Hay 2.000.000 ficheros'
    """
    ctx = LocaleContext.create(locale_code)

    def replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index == 0:
            if primary is not None:
                return primary
            value: object = magnitude
        elif index <= len(extra_args):
            value = extra_args[index - 1]
        else:
            raise MissingArgumentError(
                ErrorTemplate.missing_argument(index, phrase, len(extra_args) + 1),
                index=index,
                phrase=phrase,
            )
        return _render_value(ctx, value, match.group(2), match.group(3))

    return _MARKER.sub(replace, phrase)
