"""i18nkit exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic with a code and a hint.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "I18nError",
    "I18nParseError",
    "I18nPatternError",
]


class I18nError(Exception):
    """Base exception for all i18nkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class I18nParseError(I18nError):
    """Locale-formatted text does not match the expected pattern shape.

    Raised by the number and date parsers. Fatal to the single call only;
    catalog and format-info state are never touched by parsing.

    Attributes:
        input_value: The string that failed to parse
        pattern: The pattern (or separator description) parsing was attempted against
        parse_type: Type of parsing attempted ('number', 'date', 'datetime')

    Example:
        >>> try:
        ...     manager.parse_date("31/02/2001")
        ... except I18nParseError as e:
        ...     print(e.parse_type, e.input_value)
        date 31/02/2001
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        pattern: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize I18nParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            pattern: The pattern used for parsing
            parse_type: Type of parsing ('number', 'date', 'datetime')
        """
        super().__init__(message)
        self.input_value = input_value
        self.pattern = pattern
        self.parse_type = parse_type


class I18nPatternError(I18nError, ValueError):
    """A number pattern cannot be tokenized.

    Subclasses ValueError: a malformed pattern is a configuration mistake,
    not a data error.

    Attributes:
        pattern: The offending pattern string
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern
