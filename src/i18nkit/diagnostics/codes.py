"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages shared by the formatters and
the configuration layer.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup diagnostics (missing messages; logged, never raised)
        4000-4999: Parsing errors (text -> number/date)
        6000-6999: Pattern and configuration errors
    """

    # Lookup (1000-1999)
    MESSAGE_NOT_FOUND = 1001

    # Parsing errors (4000-4999)
    PARSE_NUMBER_FAILED = 4001
    PARSE_DATE_FAILED = 4003
    PARSE_DATETIME_FAILED = 4004
    PARSE_LITERAL_MISMATCH = 4011
    PARSE_FIELD_MISSING = 4012
    PARSE_TRAILING_INPUT = 4013

    # Pattern / configuration errors (6000-6999)
    PATTERN_MULTIPLE_DECIMAL_MARKERS = 6001
    PATTERN_NO_DIGITS = 6002
    PATTERN_UNSUPPORTED_FIELD = 6003
    PATTERN_INVALID = 6004
    FORMAT_INFO_UNKNOWN_FIELD = 6101
    FORMAT_INFO_INVALID_VALUE = 6102


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Control characters from user input are escaped so a diagnostic can
        never forge extra log lines.

        Example output:
            error[PARSE_NUMBER_FAILED]: Failed to parse number 'abc': not a decimal literal
              = help: Check that the text uses the locale's separators

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)
