"""Enumerations for humanphrase type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum


class Category(StrEnum):
    """Plural category selected for a magnitude.

    StrEnum provides automatic string conversion: str(Category.ONE) == "one"
    """

    NONE = "none"
    """Nothing to count: 0 files"""

    ONE = "one"
    """Singular: 1 file"""

    MANY = "many"
    """Everything else, including negative and fractional magnitudes"""


class Direction(StrEnum):
    """Direction of a time distance relative to its reference instant.

    StrEnum provides automatic string conversion: str(Direction.PAST) == "past"
    """

    PAST = "past"
    """3 days ago"""

    FUTURE = "future"
    """3 days from now"""


class TimeBucket(StrEnum):
    """Named range of time distances, in ascending order.

    Member order is significant: the relative time classifier walks the
    buckets in definition order and a larger delta never maps to an earlier
    bucket.
    """

    JUST_NOW = "just-now"
    MOMENTS = "moments"
    MINUTES = "minutes"
    HOURS = "hours"
    ONE_DAY = "one-day"
    DAYS = "days"
    WEEKS = "weeks"
    ONE_MONTH = "one-month"
    MONTHS = "months"
    ONE_YEAR = "one-year"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"

    @property
    def rank(self) -> int:
        """Position of the bucket in ascending order (0 = just-now)."""
        return _BUCKET_ORDER.index(self)


_BUCKET_ORDER: tuple[TimeBucket, ...] = tuple(TimeBucket)


__all__ = [
    "Category",
    "Direction",
    "TimeBucket",
]
