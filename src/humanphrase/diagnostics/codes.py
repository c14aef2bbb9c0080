"""Diagnostic codes and data structures.

Error codes and the immutable Diagnostic record attached to exceptions.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Template errors (raw template structure)
        2000-2999: Rendering errors (arguments supplied at render time)
        3000-3999: Formatting errors (locale-aware number/date collaborators)
    """

    # Template errors (1000-1999)
    MALFORMED_TEMPLATE = 1001
    INVALID_DELIMITER = 1002
    INVALID_VARIANTS = 1003

    # Rendering errors (2000-2999)
    MISSING_ARGUMENT = 2001
    INVALID_MAGNITUDE = 2002

    # Formatting errors (3000-3999)
    NUMBER_FORMATTING_FAILED = 3001
    DATE_FORMATTING_FAILED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One problem found while parsing, rendering or formatting.

    Carried by every HumanizeError built from an ErrorTemplate, so callers
    can branch on the code instead of parsing messages.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        template: Raw template or phrase involved in the error
        argument_index: Positional marker index involved in the error
        locale_code: Locale in effect when the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    template: str | None = None
    argument_index: int | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_ARGUMENT]: Phrase references argument {2} but only 1 supplied
              --> template: are {2} files
              = argument: 2
              = help: Pass at least 2 argument(s) after the magnitude

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
