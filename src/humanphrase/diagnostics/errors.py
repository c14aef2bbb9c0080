"""humanphrase exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic


class HumanizeError(Exception):
    """Base exception for all humanphrase errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize HumanizeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedTemplateError(HumanizeError):
    """Raw template does not split into a valid number of segments.

    Raised by every entry point that accepts a raw template. Fatal to the
    build call: no partial renderer is produced.

    Attributes:
        raw: The raw template that failed to parse
        segment_count: Number of segments found (0 when not applicable)
    """

    def __init__(self, message: str | Diagnostic, *, raw: str = "", segment_count: int = 0) -> None:
        super().__init__(message)
        self.raw = raw
        self.segment_count = segment_count


class MissingArgumentError(HumanizeError):
    """Phrase references a positional argument beyond those supplied.

    Surfaced at render time, since argument count is only known then.

    Attributes:
        index: Marker index that could not be bound
        phrase: Phrase containing the marker
    """

    def __init__(self, message: str | Diagnostic, *, index: int, phrase: str) -> None:
        super().__init__(message)
        self.index = index
        self.phrase = phrase


class FormattingError(HumanizeError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value that should be used in the output
    when the formatting fails, so that humanized text degrades gracefully
    while the failure stays visible in logs.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
