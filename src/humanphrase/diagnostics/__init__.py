"""Diagnostic system for humanphrase errors.

Provides structured error diagnostics with codes, hints and offending input.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormattingError,
    HumanizeError,
    MalformedTemplateError,
    MissingArgumentError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "HumanizeError",
    "MalformedTemplateError",
    "MissingArgumentError",
    "OutputFormat",
]
