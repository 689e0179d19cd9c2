"""Pattern-driven date formatting and parsing.

- format_date() renders a date/datetime against a date pattern
- parse_datetime() walks the same tokens over the input text and rebuilds a
  naive datetime (local wall-clock semantics, no timezone handling)

Field widths:
    The repeat count of a field token is the minimum number of digits emitted
    (zero-padded), except "yy", which is the CLDR two-digit year and parses
    back as the year it spells (years below 100 round-trip). When parsing, a field
    directly followed by another field ("yyyyMMdd") consumes exactly its
    width in digits; any other field consumes the longest run of ASCII
    digits, so "d/M/yyyy" accepts both "1/2/2001" and "10/12/2001".

Defaults:
    Year, month and day are mandatory for parsing. Hour, minute and second
    default to zero when the pattern does not capture them.

Thread-safe. Python 3.13+. Uses Babel for CLDR date field rendering.
"""

from __future__ import annotations

from datetime import date, datetime, time

from babel.dates import DateTimeFormat

from i18nkit.constants import PATTERN_SYMBOL_LOCALE
from i18nkit.diagnostics import ErrorTemplate, I18nParseError
from i18nkit.formatting.tokenizer import (
    DateField,
    FieldToken,
    LiteralToken,
    tokenize_date_pattern,
)
from i18nkit.locale_utils import get_babel_locale

__all__ = ["format_date", "parse_datetime"]

_ASCII_DIGITS = frozenset("0123456789")

_REQUIRED_FIELDS: tuple[tuple[DateField, str], ...] = (
    (DateField.YEAR, "year"),
    (DateField.MONTH, "month"),
    (DateField.DAY, "day"),
)


def format_date(value: date | datetime, pattern: str) -> str:
    """Format a date or datetime against a date pattern.

    Field tokens are rendered by Babel's CLDR DateTimeFormat; literal runs
    are copied verbatim. Plain date objects format as midnight when the
    pattern asks for time fields. A two-letter year ("yy") is the CLDR
    two-digit year.

    Args:
        value: Date or datetime to format
        pattern: Date pattern (e.g., "dd/MM/yyyy HH:mm:ss")

    Returns:
        Formatted string

    Raises:
        TypeError: If value is not a date or datetime
        I18nPatternError: If the pattern uses a non-numeric month field

    Example:
        >>> format_date(date(2001, 1, 10), "dd/MM/yyyy HH:mm:ss")
        '10/01/2001 00:00:00'
    """
    if not isinstance(value, date):
        msg = f"Cannot format {type(value).__name__} as a date"
        raise TypeError(msg)
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())

    fields = DateTimeFormat(value, get_babel_locale(PATTERN_SYMBOL_LOCALE))
    parts: list[str] = []
    for token in tokenize_date_pattern(pattern):
        match token:
            case LiteralToken(text=text):
                parts.append(text)
            case FieldToken():
                parts.append(fields[token.symbol])
    return "".join(parts)


def parse_datetime(value: str, pattern: str, *, parse_type: str = "datetime") -> datetime:
    """Parse text produced by format_date() back to a naive datetime.

    Args:
        value: Text to parse (e.g., "10/01/2001")
        pattern: Date pattern the text follows
        parse_type: Reported in errors ("date" or "datetime")

    Returns:
        Naive datetime; fields absent from the pattern are zero

    Raises:
        I18nParseError: If literal text does not match, a field has no
            digits, text remains after the pattern, the pattern lacks
            year/month/day, or the assembled date is out of range

    Example:
        >>> parse_datetime("10/01/2001", "dd/MM/yyyy")
        datetime.datetime(2001, 1, 10, 0, 0)
    """
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_input_not_string(value, parse_type)  # type: ignore[unreachable]
        raise I18nParseError(
            diagnostic, input_value=str(value), pattern=pattern, parse_type=parse_type
        )

    text = value.strip()
    tokens = tokenize_date_pattern(pattern)
    components: dict[DateField, int] = {}
    pos = 0

    for index, token in enumerate(tokens):
        match token:
            case LiteralToken(text=literal):
                if not text.startswith(literal, pos):
                    diagnostic = ErrorTemplate.parse_literal_mismatch(value, pattern, literal, pos)
                    raise I18nParseError(
                        diagnostic, input_value=value, pattern=pattern, parse_type=parse_type
                    )
                pos += len(literal)

            case FieldToken(field=field, width=width):
                followed_by_field = index + 1 < len(tokens) and isinstance(
                    tokens[index + 1], FieldToken
                )
                end = _scan_digits(text, pos, width if followed_by_field else None)
                if end == pos or (followed_by_field and end - pos != width):
                    diagnostic = ErrorTemplate.parse_field_digits(
                        value, pattern, token.symbol, pos, parse_type=parse_type
                    )
                    raise I18nParseError(
                        diagnostic, input_value=value, pattern=pattern, parse_type=parse_type
                    )
                components[field] = int(text[pos:end])
                pos = end

    if pos != len(text):
        diagnostic = ErrorTemplate.parse_trailing_input(value, pattern, text[pos:])
        raise I18nParseError(diagnostic, input_value=value, pattern=pattern, parse_type=parse_type)

    for field, name in _REQUIRED_FIELDS:
        if field not in components:
            diagnostic = ErrorTemplate.parse_field_missing(value, pattern, name)
            raise I18nParseError(
                diagnostic, input_value=value, pattern=pattern, parse_type=parse_type
            )

    try:
        return datetime(
            components[DateField.YEAR],
            components[DateField.MONTH],
            components[DateField.DAY],
            components.get(DateField.HOUR, 0),
            components.get(DateField.MINUTE, 0),
            components.get(DateField.SECOND, 0),
        )
    except ValueError as e:
        diagnostic = ErrorTemplate.parse_date_failed(value, pattern, str(e), parse_type=parse_type)
        raise I18nParseError(
            diagnostic, input_value=value, pattern=pattern, parse_type=parse_type
        ) from e


def _scan_digits(text: str, start: int, limit: int | None) -> int:
    """Return the end index of the digit run at start, capped at limit digits."""
    end = start
    stop = len(text) if limit is None else min(len(text), start + limit)
    while end < stop and text[end] in _ASCII_DIGITS:
        end += 1
    return end
