"""Template parser: raw delimited string to immutable phrase variants.

Template syntax:
    one::many                    "one thing::{0} things"
    none::one::many              "nothing::one thing::{0} things"
    wrapper::none::one::many     "There {0} on {1}.::are no files::is one file::are {2} files"

Segments are separated by the literal delimiter (default "::") and stripped
of surrounding whitespace. Empty segments are legal and render as "".
Any other segment count is a MalformedTemplateError.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from dataclasses import dataclass

from humanphrase.constants import (
    TEMPLATE_CACHE_SIZE,
    TEMPLATE_DELIMITER,
    TEMPLATE_SEGMENT_COUNTS,
)
from humanphrase.diagnostics import ErrorTemplate, MalformedTemplateError
from humanphrase.enums import Category

__all__ = ["Template", "parse_template"]


@dataclass(frozen=True, slots=True)
class Template:
    """Parsed, immutable set of phrase variants.

    Attributes:
        none: Phrase for the NONE category; None when the template has no
            distinct zero phrase (the many phrase is used instead)
        one: Phrase for the ONE category
        many: Phrase for the MANY category
        wrapper: Carrier phrase whose {0} receives the chosen variant
    """

    none: str | None
    one: str
    many: str
    wrapper: str | None = None

    @classmethod
    def from_variants(
        cls,
        variants: Sequence[str],
        *,
        wrapper: str | None = None,
    ) -> Template:
        """Build a template from an explicit (none, one, many) triple.

        Phrases are used verbatim (no whitespace trimming).

        Raises:
            MalformedTemplateError: If variants is not exactly three items
            TypeError: If a variant or the wrapper is not a string
        """
        if isinstance(variants, str) or len(variants) != 3:
            count = 1 if isinstance(variants, str) else len(variants)
            raise MalformedTemplateError(
                ErrorTemplate.invalid_variants(count), segment_count=count
            )
        for phrase in (*variants, wrapper):
            if phrase is not None and not isinstance(phrase, str):
                msg = f"Template phrases must be strings, got {type(phrase).__name__}"
                raise TypeError(msg)
        none, one, many = variants
        return cls(none=none, one=one, many=many, wrapper=wrapper)

    @property
    def arity(self) -> int:
        """Number of phrase variants: 2 or 3."""
        return 2 if self.none is None else 3

    def phrase_for(self, category: Category) -> str:
        """Phrase rendered for a category.

        NONE falls back to the many phrase in the two-variant form.
        """
        match category:
            case Category.NONE:
                return self.many if self.none is None else self.none
            case Category.ONE:
                return self.one
            case _:
                return self.many


@functools.lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def parse_template(raw: str, delimiter: str = TEMPLATE_DELIMITER) -> Template:
    """Parse a delimited raw template.

    Results are memoized: parsing is pure and Template is immutable.

    Args:
        raw: Raw template string
        delimiter: Segment delimiter (default "::")

    Returns:
        Parsed Template

    Raises:
        MalformedTemplateError: If the segment count is not 2, 3 or 4, or
            the delimiter is empty
        TypeError: If raw or delimiter is not a string

    Examples:
        >>> parse_template("one thing::{0} things")
        Template(none=None, one='one thing', many='{0} things', wrapper=None)
        >>> parse_template(" a :: b :: c ").none
        'a'
    """
    if not isinstance(raw, str) or not isinstance(delimiter, str):
        msg = "Template and delimiter must be strings"
        raise TypeError(msg)
    if not delimiter:
        raise MalformedTemplateError(ErrorTemplate.invalid_delimiter(delimiter), raw=raw)

    segments = [segment.strip() for segment in raw.split(delimiter)]
    count = len(segments)
    if count not in TEMPLATE_SEGMENT_COUNTS:
        raise MalformedTemplateError(
            ErrorTemplate.malformed_template(raw, count, delimiter),
            raw=raw,
            segment_count=count,
        )

    if count == 2:
        one, many = segments
        return Template(none=None, one=one, many=many)
    wrapper = segments[0] if count == 4 else None
    none, one, many = segments[-3:]
    return Template(none=none, one=one, many=many, wrapper=wrapper)
