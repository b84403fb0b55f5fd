"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to g11n errors.
Python 3.13+. Zero external dependencies.
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
        1000-1999: Argument errors (caller contract violations)
        2000-2999: Formatting errors (interpolation, date formatting)
    """

    # Argument errors (1000-1999)
    INVALID_KEY = 1001
    INVALID_DATE = 1002
    INVALID_OPTIONS = 1003
    INVALID_LISTENER = 1004

    # Formatting errors (2000-2999)
    INTERPOLATION_FAILED = 2001
    DATE_FORMATTING_FAILED = 2002
    DATE_FORMAT_MISSING = 2003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key_path: Normalized lookup path involved in the error, if any
        received_type: Actual type received (argument errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key_path: tuple[str, ...] | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[INVALID_KEY]: invalid argument: key
              = path: globalization.en
              = received: int
              = help: Pass a non-empty string or list of strings

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.key_path is not None:
            lines.append(f"  = path: {'.'.join(self.key_path)}")
        if self.received_type is not None:
            lines.append(f"  = received: {self.received_type}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
