"""Tests for placeholder substitution.

Covers:
- Positional binding of the magnitude and extra arguments
- Locale-aware number and date rendering, with inline format hints
- Literal text bound to {0} for wrapper phrases
- MissingArgumentError for unbound markers
- Fallback output when a formatter fails
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from humanphrase.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    FormattingError,
    MissingArgumentError,
)
from humanphrase.runtime.locale_context import LocaleContext
from humanphrase.template.substitution import find_markers, substitute


class TestMarkerDiscovery:
    """find_markers lists marker indexes left to right."""

    def test_plain_and_hinted_markers(self) -> None:
        assert find_markers("There {0} on {1}, {1,number}, {2, date, short}") == (0, 1, 1, 2)

    def test_non_markers_ignored(self) -> None:
        assert find_markers("{name} {} { 0 } {0,currency}") == ()


class TestPositionalBinding:
    """{0} is the magnitude, {i} the (i-1)th extra argument."""

    def test_magnitude_and_argument(self) -> None:
        assert substitute("{0} files on {1}", 3, ["disk"], "en") == "3 files on disk"

    def test_repeated_marker(self) -> None:
        assert substitute("{1} and {1}", 0, ["x"], "en") == "x and x"

    def test_unused_arguments_ignored(self) -> None:
        assert substitute("no markers", 5, ["a", "b"], "en") == "no markers"

    def test_non_marker_braces_pass_through(self) -> None:
        assert substitute("{name} has {0}", 2, [], "en") == "{name} has 2"

    def test_non_numeric_argument_uses_str(self) -> None:
        assert substitute("{1}", 0, [True], "en") == "True"
        assert substitute("{1,number}", 0, ["abc"], "en") == "abc"

    def test_primary_text_replaces_magnitude(self) -> None:
        result = substitute("There {0} on {1}.", 5, ["disk"], "en", primary="are 5 files")
        assert result == "There are 5 files on disk."


class TestNumberRendering:
    """Numbers go through the locale number formatter."""

    def test_grouping_en(self) -> None:
        assert substitute("{0}", 1000, [], "en") == "1,000"

    def test_grouping_es(self) -> None:
        assert substitute("Hay {0,number} ficheros", 2000000, [], "es") == "Hay 2.000.000 ficheros"

    def test_decimal_separator_de(self) -> None:
        assert substitute("{0}", 1234.5, [], "de") == "1.234,5"

    def test_negative(self) -> None:
        assert substitute("{0} things", -1, [], "en") == "-1 things"

    def test_decimal_value(self) -> None:
        assert substitute("{0}", Decimal("2.50"), [], "en") == "2.5"

    def test_numeric_extra_argument(self) -> None:
        assert substitute("{1} bytes", 0, [1048576], "en") == "1,048,576 bytes"

    def test_integer_hint(self) -> None:
        assert substitute("{0,number,integer}", 2.6, [], "en") == "3"

    def test_pattern_hint(self) -> None:
        assert substitute("{1,number,#,##0.00}", 0, [1234.5], "en") == "1,234.50"

    def test_number_hint_on_date_uses_str(self) -> None:
        assert substitute("{1,number}", 0, [date(2015, 12, 7)], "en") == "2015-12-07"


class TestDateRendering:
    """Dates go through the locale date formatter."""

    def test_default_medium_style(self) -> None:
        assert substitute("{1}", 0, [date(2015, 12, 7)], "en") == "Dec 7, 2015"

    def test_short_style(self) -> None:
        assert substitute("{1,date,short}", 0, [date(2015, 12, 7)], "en") == "12/7/15"

    def test_pattern(self) -> None:
        value = datetime(2015, 12, 7, 10, 30)
        assert substitute("{1,date,yyyy-MM-dd}", 0, [value], "en") == "2015-12-07"


class TestMissingArguments:
    """Markers beyond the supplied arguments fail at render time."""

    def test_missing_extra_argument(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            substitute("are {2} files", 5, ["disk"], "en")
        error = exc_info.value
        assert error.index == 2
        assert error.phrase == "are {2} files"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.MISSING_ARGUMENT
        assert error.diagnostic.argument_index == 2

    def test_no_extra_arguments(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            substitute("on {1}", 5, [], "en")
        assert exc_info.value.index == 1


class TestFormattingFallback:
    """Formatter failures degrade to the fallback value and are logged."""

    def test_number_failure_uses_fallback(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def failing_format_number(
            self: LocaleContext, value: object, style: str | None = None
        ) -> str:
            diagnostic = ErrorTemplate.number_formatting_failed(value, self.locale_code, "boom")
            raise FormattingError(diagnostic, fallback_value=f"<{value}>")

        monkeypatch.setattr(LocaleContext, "format_number", failing_format_number)
        with caplog.at_level(logging.WARNING, logger="humanphrase.template.substitution"):
            result = substitute("{0} items", 5, [], "en")

        assert result == "<5> items"
        assert "boom" in caplog.text
