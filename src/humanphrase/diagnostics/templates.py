"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Factory of Diagnostic objects, one static method per error code.

    Exceptions are raised with these diagnostics rather than ad hoc strings,
    so wording and hints live in one place.
    """

    @staticmethod
    def malformed_template(raw: str, segment_count: int, delimiter: str) -> Diagnostic:
        """Raw template split into an unsupported number of segments.

        Args:
            raw: The raw template
            segment_count: Number of segments found
            delimiter: Delimiter used for splitting

        Returns:
            Diagnostic for MALFORMED_TEMPLATE
        """
        msg = f"Template has {segment_count} segment(s); expected 2, 3 or 4"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_TEMPLATE,
            message=msg,
            hint=(
                f"Separate variants with '{delimiter}': 'one::many', 'none::one::many' "
                f"or 'wrapper::none::one::many'"
            ),
            template=raw,
        )

    @staticmethod
    def invalid_delimiter(delimiter: str) -> Diagnostic:
        """Delimiter cannot split anything.

        Args:
            delimiter: The rejected delimiter

        Returns:
            Diagnostic for INVALID_DELIMITER
        """
        msg = f"Invalid template delimiter {delimiter!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DELIMITER,
            message=msg,
            hint="Use a non-empty delimiter such as '::'",
        )

    @staticmethod
    def invalid_variants(variant_count: int) -> Diagnostic:
        """Explicit variant sequence is not a (none, one, many) triple.

        Args:
            variant_count: Number of variants supplied

        Returns:
            Diagnostic for INVALID_VARIANTS
        """
        msg = f"Expected (none, one, many) variants, got {variant_count} item(s)"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VARIANTS,
            message=msg,
            hint="Pass exactly three phrases, or a single delimited template string",
        )

    @staticmethod
    def missing_argument(index: int, phrase: str, supplied: int) -> Diagnostic:
        """Phrase marker references an argument that was not supplied.

        Args:
            index: Marker index ({index})
            phrase: Phrase containing the marker
            supplied: Number of positional arguments supplied, magnitude included

        Returns:
            Diagnostic for MISSING_ARGUMENT
        """
        msg = f"Phrase references argument {{{index}}} but only {supplied} supplied"
        return Diagnostic(
            code=DiagnosticCode.MISSING_ARGUMENT,
            message=msg,
            hint=f"Pass at least {index} argument(s) after the magnitude",
            template=phrase,
            argument_index=index,
        )

    @staticmethod
    def invalid_magnitude(value: object) -> Diagnostic:
        """Magnitude is not a number.

        Args:
            value: The rejected magnitude

        Returns:
            Diagnostic for INVALID_MAGNITUDE
        """
        type_name = type(value).__name__
        msg = f"Magnitude must be int, float or Decimal, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MAGNITUDE,
            message=msg,
            hint="Convert the count to a number before rendering",
        )

    @staticmethod
    def number_formatting_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Locale-aware number formatting failed.

        Args:
            value: Value being formatted
            locale_code: Locale in effect
            reason: Underlying error text

        Returns:
            Diagnostic for NUMBER_FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_FORMATTING_FAILED,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def date_formatting_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Locale-aware date formatting failed.

        Args:
            value: Value being formatted
            locale_code: Locale in effect
            reason: Underlying error text

        Returns:
            Diagnostic for DATE_FORMATTING_FAILED
        """
        msg = f"Date formatting failed for '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.DATE_FORMATTING_FAILED,
            message=msg,
            locale_code=locale_code,
        )
