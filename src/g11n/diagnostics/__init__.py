"""Diagnostic system for g11n errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import FormattingError, G11nError, InvalidArgumentError

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "FormattingError",
    "G11nError",
    "InvalidArgumentError",
]
