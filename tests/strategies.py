"""Hypothesis strategies for humanphrase property-based testing.

Usage:
    from hypothesis import given
    from tests.strategies import plain_phrases, time_deltas

    @given(phrase=plain_phrases)
    def test_phrase(phrase):
        ...
"""

from __future__ import annotations

import string
from decimal import Decimal
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from humanphrase.constants import MS_PER_CENTURY, MS_PER_DAY, MS_PER_HOUR, MS_PER_YEAR

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# ============================================================================
# PHRASES
# ============================================================================

# Marker-free phrases without delimiter characters or surrounding whitespace,
# so that delimited and explicit forms of a template are interchangeable.
plain_phrases: SearchStrategy[str] = st.text(
    alphabet=string.ascii_letters + " ", max_size=20
).map(str.strip)

phrase_triples: SearchStrategy[tuple[str, str, str]] = st.tuples(
    plain_phrases, plain_phrases, plain_phrases
)

# ============================================================================
# MAGNITUDES
# ============================================================================

integer_magnitudes: SearchStrategy[int] = st.integers(min_value=-10**12, max_value=10**12)

magnitudes: SearchStrategy[int | float | Decimal] = st.one_of(
    integer_magnitudes,
    st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9),
    st.decimals(allow_nan=False, allow_infinity=False, min_value=-10**9, max_value=10**9),
)

# Anything ensure_magnitude accepts, including NaN, infinities and huge values
any_magnitudes: SearchStrategy[int | float | Decimal] = st.one_of(
    st.integers(),
    st.floats(),
    st.decimals(),
)

# ============================================================================
# TIME DELTAS
# ============================================================================

time_deltas: SearchStrategy[int] = st.integers(
    min_value=-10 * MS_PER_CENTURY, max_value=10 * MS_PER_CENTURY
)


@composite
def time_delta_by_scale(draw: DrawFn) -> int:
    """Signed delta drawn from a named scale, so every bucket gets traffic.

    Events emitted:
    - delta_scale={seconds|hours|days|years|centuries}
    """
    scale = draw(st.sampled_from(["seconds", "hours", "days", "years", "centuries"]))
    limits = {
        "seconds": 60_000,
        "hours": 30 * MS_PER_HOUR,
        "days": 40 * MS_PER_DAY,
        "years": 12 * MS_PER_YEAR,
        "centuries": 5 * MS_PER_CENTURY,
    }
    event(f"delta_scale={scale}")
    return draw(st.integers(min_value=-limits[scale], max_value=limits[scale]))
