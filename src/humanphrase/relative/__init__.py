"""Relative time package.

Classifies signed time deltas into buckets and renders them as
natural-language distances ("3 days ago", "one day from now").

Python 3.11+.
"""

from .classifier import BUCKET_TABLE, BucketRow, Classification, classify, to_millis
from .renderer import (
    RelativeTimeFormatter,
    format_delta,
    get_relative_time_formatter,
    natural_day,
    natural_time,
    relative_time,
)

__all__ = [
    "BUCKET_TABLE",
    "BucketRow",
    "Classification",
    "RelativeTimeFormatter",
    "classify",
    "format_delta",
    "get_relative_time_formatter",
    "natural_day",
    "natural_time",
    "relative_time",
    "to_millis",
]
