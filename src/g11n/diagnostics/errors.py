"""g11n exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FormattingError",
    "G11nError",
    "InvalidArgumentError",
]


class G11nError(Exception):
    """Base exception for all g11n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize G11nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(G11nError, ValueError):
    """Caller passed an argument outside the operation's contract.

    Raised synchronously by translate() for an empty or non-string/non-list
    key and by localize() for a value that is not a date, datetime or time.
    Never retried or recovered internally.
    """


class FormattingError(G11nError):
    """Raised when interpolation or date formatting fails.

    Carries a fallback_value the registry returns in non-strict mode, so the
    caller still receives usable output while the failure is logged.

    Attributes:
        fallback_value: Value to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: object) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
