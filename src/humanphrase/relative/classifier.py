"""Relative Time Classifier.

Maps a signed time delta to a bucket, a rounded magnitude and a direction
using a fixed, ascending threshold table. Thresholds are non-uniform:
"hours" stops short of a full day and the singular buckets ("one-day",
"one-month", "one-year") absorb the range where the rounded count would
otherwise read awkwardly ("1.75 days" -> "one day").

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from humanphrase.constants import (
    MS_PER_CENTURY,
    MS_PER_DAY,
    MS_PER_DECADE,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR,
)
from humanphrase.enums import TimeBucket

__all__ = [
    "BUCKET_TABLE",
    "BucketRow",
    "Classification",
    "classify",
    "to_millis",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BucketRow:
    """Threshold table row.

    Attributes:
        bucket: Bucket this row classifies into
        upper_bound: Exclusive upper bound on |delta| in ms (None = unbounded)
        divisor: Milliseconds per counted unit; None for singular buckets
            (magnitude is always 1) and for just-now (magnitude is 0)
        phrase_key: Phrase dictionary key used to render the bucket
        scale: Multiplier from bucket unit to phrase unit (decades are
            phrased as tens of years)
        pluralized: False for fixed phrases that bypass the template engine
    """

    bucket: TimeBucket
    upper_bound: int | None
    divisor: int | None
    phrase_key: str
    scale: int = 1
    pluralized: bool = True


BUCKET_TABLE: tuple[BucketRow, ...] = (
    BucketRow(TimeBucket.JUST_NOW, MS_PER_SECOND, None, "just-now", pluralized=False),
    BucketRow(TimeBucket.MOMENTS, 45 * MS_PER_SECOND, MS_PER_SECOND, "moments", pluralized=False),
    BucketRow(TimeBucket.MINUTES, 45 * MS_PER_MINUTE, MS_PER_MINUTE, "minutes"),
    BucketRow(TimeBucket.HOURS, MS_PER_DAY * 95 // 100, MS_PER_HOUR, "hours"),
    BucketRow(TimeBucket.ONE_DAY, 42 * MS_PER_HOUR, None, "days"),
    BucketRow(TimeBucket.DAYS, MS_PER_DAY * 13 // 2, MS_PER_DAY, "days"),
    BucketRow(TimeBucket.WEEKS, 30 * MS_PER_DAY, MS_PER_WEEK, "weeks"),
    BucketRow(TimeBucket.ONE_MONTH, MS_PER_MONTH * 3 // 2, None, "months"),
    BucketRow(TimeBucket.MONTHS, MS_PER_YEAR * 95 // 100, MS_PER_MONTH, "months"),
    BucketRow(TimeBucket.ONE_YEAR, MS_PER_YEAR * 3 // 2, None, "years"),
    BucketRow(TimeBucket.YEARS, MS_PER_DECADE, MS_PER_YEAR, "years"),
    BucketRow(TimeBucket.DECADES, MS_PER_CENTURY, MS_PER_DECADE, "years", scale=10),
    BucketRow(TimeBucket.CENTURIES, None, MS_PER_CENTURY, "years", scale=100),
)

_ROWS: dict[TimeBucket, BucketRow] = {row.bucket: row for row in BUCKET_TABLE}


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying a time delta.

    Attributes:
        bucket: Bucket the delta falls into
        magnitude: Rounded count of bucket units (0 only for just-now)
        is_future: True when the delta is positive
    """

    bucket: TimeBucket
    magnitude: int
    is_future: bool

    @property
    def row(self) -> BucketRow:
        """Threshold table row of the bucket."""
        return _ROWS[self.bucket]


def to_millis(delta: int | float | Decimal | timedelta) -> int:
    """Convert a delta to whole milliseconds.

    Integers pass through; timedelta is converted exactly (sub-millisecond
    remainders are dropped toward negative infinity, as timedelta itself
    normalizes); float and Decimal are rounded to the nearest millisecond,
    ties away from zero.

    Raises:
        TypeError: If delta is not a number or timedelta
    """
    if isinstance(delta, timedelta):
        return (delta.days * 86_400 + delta.seconds) * MS_PER_SECOND + delta.microseconds // 1_000
    if isinstance(delta, bool) or not isinstance(delta, int | float | Decimal):
        msg = f"Delta must be int, float, Decimal or timedelta, got {type(delta).__name__}"
        raise TypeError(msg)
    if isinstance(delta, int):
        return delta
    return int(Decimal(delta).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _round_half_up(value: int, divisor: int) -> int:
    """Nearest integer to value / divisor for non-negative value, ties up."""
    return (2 * value + divisor) // (2 * divisor)


def classify(delta_millis: int | float | Decimal | timedelta) -> Classification:
    """Classify a signed time delta.

    Args:
        delta_millis: Signed delta in milliseconds (or a timedelta);
            positive means the later instant lies in the future

    Returns:
        Classification with bucket, rounded magnitude and direction

    Raises:
        TypeError: If the delta is not a number or timedelta

    Examples:
        >>> classify(12 * 60 * 1000)
        Classification(bucket=<TimeBucket.MINUTES: 'minutes'>, magnitude=12, is_future=True)
        >>> classify(-86_400_000).bucket
        <TimeBucket.ONE_DAY: 'one-day'>
    """
    millis = to_millis(delta_millis)
    distance = abs(millis)
    row = next(
        candidate
        for candidate in BUCKET_TABLE
        if candidate.upper_bound is None or distance < candidate.upper_bound
    )

    if row.bucket is TimeBucket.JUST_NOW:
        magnitude = 0
    elif row.divisor is None:
        magnitude = 1
    else:
        magnitude = _round_half_up(distance, row.divisor)

    result = Classification(bucket=row.bucket, magnitude=magnitude, is_future=millis > 0)
    logger.debug("Classified %d ms as %s x%d", millis, row.bucket, magnitude)
    return result
