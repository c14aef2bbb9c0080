"""Relative Time Renderer.

Turns time distances into phrases such as "12 minutes from now" or
"one day ago": the classifier picks a bucket, the registry supplies the
locale phrase for the bucket and direction, and the plural template engine
renders the bucket magnitude.

Instants may be datetimes, dates, or numbers of epoch milliseconds; both
endpoints of one call must be of compatible kinds.

Python 3.11+.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from humanphrase.diagnostics import FormattingError
from humanphrase.enums import Direction, TimeBucket
from humanphrase.relative.classifier import classify
from humanphrase.runtime.locale_context import LocaleContext
from humanphrase.template.renderer import build_plural_template

if TYPE_CHECKING:
    from humanphrase.registry import LocaleRegistry

__all__ = [
    "Instant",
    "RelativeTimeFormatter",
    "format_delta",
    "get_relative_time_formatter",
    "natural_day",
    "natural_time",
    "relative_time",
]

logger = logging.getLogger(__name__)

Instant = datetime | date | int | float | Decimal

_DAY_KEYS: dict[int, str] = {0: "today", 1: "tomorrow", -1: "yesterday"}


def _registry_or_shared(registry: LocaleRegistry | None) -> LocaleRegistry:
    if registry is not None:
        return registry
    from humanphrase.registry import get_shared_registry  # noqa: PLC0415 - circular

    return get_shared_registry()


def _now_like(instant: Instant) -> Instant:
    """Current instant of the same kind as the given one."""
    if isinstance(instant, datetime):
        return datetime.now(instant.tzinfo)
    if isinstance(instant, date):
        return date.today()
    return time.time_ns() // 1_000_000


def format_delta(
    delta: int | float | Decimal | timedelta,
    locale: str | None = None,
    *,
    registry: LocaleRegistry | None = None,
) -> str:
    """Render a signed time delta as a natural-language distance.

    Args:
        delta: Signed delta in milliseconds, or a timedelta; positive
            deltas read "from now", negative ones "ago"
        locale: Locale code; None uses the registry's default locale
        registry: Registry with phrases and rules; None uses the shared one

    Returns:
        Time distance phrase

    Examples:
        >>> format_delta(720_000)
        '12 minutes from now'
        >>> format_delta(-86_400_000)
        'one day ago'
        >>> format_delta(0, "es")
        'justo ahora'
    """
    registry = _registry_or_shared(registry)
    result = classify(delta)
    row = result.row

    if result.bucket is TimeBucket.JUST_NOW:
        return registry.phrase(row.phrase_key, None, locale)

    direction = Direction.FUTURE if result.is_future else Direction.PAST
    phrase = registry.phrase(row.phrase_key, direction, locale)
    if not row.pluralized:
        return phrase

    renderer = build_plural_template(phrase, locale, registry=registry)
    return renderer.render(result.magnitude * row.scale)


def relative_time(
    first: Instant,
    second: Instant | None = None,
    *,
    locale: str | None = None,
    registry: LocaleRegistry | None = None,
    now: Instant | None = None,
) -> str:
    """Render the distance between two instants, or between now and one instant.

    With two instants the delta is ``second - first``: "from now" when the
    second instant is later. With one instant the delta is
    ``first - now``: "from now" when the instant lies in the future.

    Args:
        first: Reference instant (or the only instant)
        second: Other instant; None compares first against now
        locale: Locale code; None uses the registry's default locale
        registry: Registry with phrases and rules; None uses the shared one
        now: Current instant override (defaults to the clock)

    Returns:
        Time distance phrase

    Examples:
        >>> from datetime import UTC, datetime, timedelta
        >>> start = datetime(2020, 1, 1, tzinfo=UTC)
        >>> relative_time(start, start + timedelta(hours=3))
        '3 hours from now'
        >>> relative_time(start + timedelta(days=21), start)
        '3 weeks ago'
    """
    if second is None:
        reference = _now_like(first) if now is None else now
        first, second = reference, first

    delta = second - first  # type: ignore[operator]
    return format_delta(delta, locale, registry=registry)


natural_time = relative_time


def natural_day(
    value: date,
    *,
    locale: str | None = None,
    registry: LocaleRegistry | None = None,
    today: date | None = None,
) -> str:
    """Name a day relative to today, or format it in the locale's short style.

    Args:
        value: Date or datetime to describe
        locale: Locale code; None uses the registry's default locale
        registry: Registry with phrases; None uses the shared one
        today: Current date override (defaults to the clock)

    Returns:
        "today", "tomorrow", "yesterday" (localized) or the formatted date

    Examples:
        >>> from datetime import date
        >>> natural_day(date(2015, 12, 8), today=date(2015, 12, 7))
        'tomorrow'
        >>> natural_day(date(2015, 12, 1), today=date(2015, 12, 7))
        '12/1/15'
    """
    registry = _registry_or_shared(registry)
    if isinstance(value, datetime):
        day = value.date()
        current = datetime.now(value.tzinfo).date() if today is None else today
    else:
        day = value
        current = date.today() if today is None else today
    if isinstance(current, datetime):
        current = current.date()

    key = _DAY_KEYS.get((day - current).days)
    if key is not None:
        return registry.phrase(key, None, locale)

    ctx = LocaleContext.create(registry.default_locale if locale is None else locale)
    try:
        return ctx.format_date(day, "short")
    except FormattingError as e:
        logger.warning("Using fallback '%s': %s", e.fallback_value, e)
        return e.fallback_value


@dataclass(frozen=True, slots=True)
class RelativeTimeFormatter:
    """Relative time renderer bound to a locale and registry.

    Attributes:
        locale: Locale code; None uses the registry's default locale
        registry: Registry with phrases and rules; None uses the shared one
            at call time

    Example:
        >>> formatter = get_relative_time_formatter("es")
        >>> formatter.format_delta(-3 * 3_600_000)
        'hace 3 horas'
    """

    locale: str | None = None
    registry: LocaleRegistry | None = None

    def format(
        self, first: Instant, second: Instant | None = None, *, now: Instant | None = None
    ) -> str:
        """Render the distance between instants; see relative_time()."""
        return relative_time(first, second, locale=self.locale, registry=self.registry, now=now)

    def format_delta(self, delta: int | float | Decimal | timedelta) -> str:
        """Render a signed delta; see format_delta()."""
        return format_delta(delta, self.locale, registry=self.registry)


def get_relative_time_formatter(
    locale: str | None = None,
    *,
    registry: LocaleRegistry | None = None,
) -> RelativeTimeFormatter:
    """Create a RelativeTimeFormatter for a locale."""
    return RelativeTimeFormatter(locale=locale, registry=registry)
