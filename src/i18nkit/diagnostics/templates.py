"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def message_not_found(key: str, chain: tuple[str, ...]) -> Diagnostic:
        """Message key resolved in none of the searched locales.

        Args:
            key: The dotted message key
            chain: Locales searched, in order

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{key}' not found in locales {', '.join(chain) or '(none)'}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Register a bundle that defines this key as a string",
        )

    @staticmethod
    def parse_number_failed(value: str, reason: str) -> Diagnostic:
        """Number parsing failed.

        Args:
            value: The input string that failed to parse
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_NUMBER_FAILED
        """
        msg = f"Failed to parse number '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMBER_FAILED,
            message=msg,
            hint="Check that the text uses the locale's decimal and grouping separators",
        )

    @staticmethod
    def parse_date_failed(
        value: str, pattern: str, reason: str, *, parse_type: str = "date"
    ) -> Diagnostic:
        """Date or datetime parsing failed.

        Args:
            value: The input string that failed to parse
            pattern: The date pattern
            reason: The reason parsing failed
            parse_type: "date" or "datetime"

        Returns:
            Diagnostic for PARSE_DATE_FAILED or PARSE_DATETIME_FAILED
        """
        code = (
            DiagnosticCode.PARSE_DATETIME_FAILED
            if parse_type == "datetime"
            else DiagnosticCode.PARSE_DATE_FAILED
        )
        msg = f"Failed to parse {parse_type} '{value}' with pattern '{pattern}': {reason}"
        return Diagnostic(
            code=code,
            message=msg,
            hint=f"Expected text shaped like '{pattern}'",
        )

    @staticmethod
    def parse_input_not_string(value: object, parse_type: str) -> Diagnostic:
        """Parser received something other than text.

        Args:
            value: The offending input
            parse_type: "number", "date" or "datetime"

        Returns:
            Diagnostic for PARSE_NUMBER_FAILED, PARSE_DATE_FAILED or
            PARSE_DATETIME_FAILED
        """
        code = {
            "number": DiagnosticCode.PARSE_NUMBER_FAILED,
            "datetime": DiagnosticCode.PARSE_DATETIME_FAILED,
        }.get(parse_type, DiagnosticCode.PARSE_DATE_FAILED)
        msg = f"Failed to parse {parse_type} {value!r}: expected string, got {type(value).__name__}"
        return Diagnostic(code=code, message=msg, hint="Parsers accept str only")

    @staticmethod
    def parse_field_digits(
        value: str, pattern: str, field_symbol: str, position: int, *, parse_type: str = "date"
    ) -> Diagnostic:
        """A date field found no digits (or too few for a fixed-width field).

        Args:
            value: The input string that failed to parse
            pattern: The date pattern
            field_symbol: The field as written in the pattern (e.g., "dd")
            position: Offset in the stripped input where digits were expected
            parse_type: "date" or "datetime"

        Returns:
            Diagnostic for PARSE_DATE_FAILED or PARSE_DATETIME_FAILED
        """
        return ErrorTemplate.parse_date_failed(
            value,
            pattern,
            f"expected digits for '{field_symbol}' at position {position}",
            parse_type=parse_type,
        )

    @staticmethod
    def parse_literal_mismatch(value: str, pattern: str, expected: str, position: int) -> Diagnostic:
        """Literal text in the input differs from the pattern's literal run."""
        msg = (
            f"Failed to parse date '{value}' with pattern '{pattern}': "
            f"expected '{expected}' at position {position}"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_LITERAL_MISMATCH,
            message=msg,
            hint="Separators in the text must match the pattern exactly",
        )

    @staticmethod
    def parse_field_missing(value: str, pattern: str, field_name: str) -> Diagnostic:
        """Pattern does not capture a mandatory date field."""
        msg = f"Cannot build a date from '{value}': pattern '{pattern}' has no {field_name} field"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FIELD_MISSING,
            message=msg,
            hint="Date patterns used for parsing must contain year, month and day",
        )

    @staticmethod
    def parse_trailing_input(value: str, pattern: str, remainder: str) -> Diagnostic:
        """Text continues after the pattern is exhausted."""
        msg = f"Failed to parse date '{value}' with pattern '{pattern}': unexpected '{remainder}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_INPUT,
            message=msg,
            hint="Remove trailing text or extend the pattern",
        )

    @staticmethod
    def pattern_multiple_decimal_markers(pattern: str) -> Diagnostic:
        """Number pattern contains more than one decimal marker."""
        msg = f"Number pattern '{pattern}' contains more than one '.'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MULTIPLE_DECIMAL_MARKERS,
            message=msg,
            hint="Use '.' once to separate integer and fraction digits, e.g. '#,##0.00'",
        )

    @staticmethod
    def pattern_no_digits(pattern: str) -> Diagnostic:
        """Number pattern has no digit markers at all."""
        msg = f"Number pattern '{pattern}' contains no '0' or '#' digit markers"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NO_DIGITS,
            message=msg,
            hint="Integer patterns need at least one digit marker, e.g. '#,##0'",
        )

    @staticmethod
    def pattern_unsupported_field(pattern: str, field_symbol: str) -> Diagnostic:
        """Date pattern contains a field that renders as text rather than digits."""
        msg = f"Date pattern '{pattern}' uses unsupported field '{field_symbol}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNSUPPORTED_FIELD,
            message=msg,
            hint="Use 'M' or 'MM' for numeric months",
        )

    @staticmethod
    def pattern_invalid(pattern: str, reason: str) -> Diagnostic:
        """Number pattern rejected by the CLDR pattern parser."""
        msg = f"Invalid number pattern '{pattern}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID,
            message=msg,
            hint="See the CLDR number pattern syntax, e.g. '#,##0.00'",
        )

    @staticmethod
    def format_info_unknown_field(name: str) -> Diagnostic:
        """Format-info mapping has a key that is not a FormatInfo field."""
        msg = f"Unknown format info field '{name}'"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_INFO_UNKNOWN_FIELD,
            message=msg,
            hint="Use camelCase wire names (datePattern) or field names (date_pattern)",
        )

    @staticmethod
    def format_info_invalid_value(name: str, reason: str) -> Diagnostic:
        """Format-info field has an unusable value."""
        msg = f"Invalid format info field '{name}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_INFO_INVALID_VALUE,
            message=msg,
        )
