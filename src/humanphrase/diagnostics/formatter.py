"""Rendering of diagnostics for logs, terminals and tooling.

Three layouts share one field extraction step:

    rust    error[MISSING_ARGUMENT]: Phrase references argument {2} but only 2 supplied
              --> template: are {2} files
              = argument: 2
              = help: Pass at least 2 argument(s) after the magnitude
    simple  MISSING_ARGUMENT: Phrase references argument {2} but only 2 supplied
    json    {"code": "MISSING_ARGUMENT", "code_value": 2001, ...}

Python 3.11+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Diagnostic layouts."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Formats Diagnostic objects.

    Attributes:
        output_format: Layout to produce
        sanitize: Truncate user-supplied text (templates, messages, hints)
        color: Wrap the severity in ANSI colors (rust layout only)
        max_content_length: Truncation length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.invalid_delimiter(""))
        "INVALID_DELIMITER: Invalid template delimiter ''"
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        if self.output_format is OutputFormat.SIMPLE:
            return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
        if self.output_format is OutputFormat.JSON:
            return self._json(diagnostic)
        return self._rust(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _rust(self, diagnostic: Diagnostic) -> str:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.template is not None:
            lines.append(f"  --> template: {_escape(self._clip(diagnostic.template))}")
        if diagnostic.argument_index is not None:
            lines.append(f"  = argument: {diagnostic.argument_index}")
        if diagnostic.locale_code:
            lines.append(f"  = locale: {diagnostic.locale_code}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        return "\n".join(lines)

    def _json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        optional: dict[str, str | int | None] = {
            "template": None if diagnostic.template is None else self._clip(diagnostic.template),
            "argument_index": diagnostic.argument_index,
            "locale_code": diagnostic.locale_code or None,
            "hint": self._clip(diagnostic.hint) if diagnostic.hint else None,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return f"{text[: self.max_content_length]}..."
        return text


def _escape(text: str) -> str:
    """Escape control characters so a template cannot forge extra log lines."""
    if text.isprintable():
        return text
    return text.encode("unicode_escape").decode("ascii")
