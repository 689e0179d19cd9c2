"""Pattern tokenizer for date and number patterns.

Date patterns ("dd/MM/yyyy HH:mm:ss") become an ordered sequence of literal
runs and field tokens. A maximal run of one field letter is one token; its
repeat count is the zero-padding width used for formatting and the digit
count expected when parsing. Month runs longer than two letters are CLDR
month names, which cannot be parsed back, and are rejected.

Number patterns ("#,##0.00#######") use CLDR number pattern syntax and are
parsed by Babel. The result is summarized as digit counts ('0' required,
'#' optional) on each side of the decimal marker '.' plus the primary
grouping width. Markers are structural only: the separators actually
rendered come from the locale's FormatInfo. Text before and after the
digit markers is a literal prefix or suffix.

Tokenization is cached per pattern string; patterns come from a handful of
FormatInfo records so the cache stays small.

Python 3.13+. Uses Babel for CLDR number pattern parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import TypeAlias

from babel import numbers as babel_numbers

from i18nkit.constants import (
    DATE_FIELD_CHARS,
    MAX_NUMERIC_MONTH_WIDTH,
    NEGATIVE_SUBPATTERN_SEPARATOR,
    NUMBER_DECIMAL_MARKER,
    NUMBER_GROUPING_MARKER,
)
from i18nkit.diagnostics import ErrorTemplate, I18nPatternError

__all__ = [
    "DateField",
    "FieldToken",
    "LiteralToken",
    "NumberPattern",
    "PatternKind",
    "Token",
    "parse_cldr_number_pattern",
    "tokenize",
    "tokenize_date_pattern",
    "tokenize_number_pattern",
]


class PatternKind(StrEnum):
    """Which grammar a pattern string follows."""

    DATE = "date"
    NUMBER = "number"


class DateField(StrEnum):
    """Date component addressed by a field token (value is the pattern letter)."""

    YEAR = "y"
    MONTH = "M"
    DAY = "d"
    HOUR = "H"
    MINUTE = "m"
    SECOND = "s"


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Literal text copied through verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class FieldToken:
    """Date field with its repeat count (padding width)."""

    field: DateField
    width: int

    @property
    def symbol(self) -> str:
        """The field as written in the pattern (e.g., "dd")."""
        return self.field.value * self.width


Token: TypeAlias = LiteralToken | FieldToken


@dataclass(frozen=True, slots=True)
class NumberPattern:
    """Tokenized number pattern.

    Attributes:
        pattern: Source pattern string
        min_integer_digits: Count of '0' markers on the integer side
        group_size: Digits per primary group, 0 if the pattern has no ',' marker
        min_fraction_digits: Count of '0' markers on the fraction side
        max_fraction_digits: Count of '0' and '#' markers on the fraction side
        has_decimal_marker: Whether the pattern contains '.'
    """

    pattern: str
    min_integer_digits: int
    group_size: int
    min_fraction_digits: int
    max_fraction_digits: int
    has_decimal_marker: bool


@lru_cache(maxsize=128)
def tokenize_date_pattern(pattern: str) -> tuple[Token, ...]:
    """Split a date pattern into literal and field tokens.

    Args:
        pattern: Date pattern (e.g., "dd/MM/yyyy")

    Returns:
        Tuple of tokens in pattern order. Adjacent literal characters are
        merged into a single LiteralToken.

    Raises:
        I18nPatternError: If a month run is longer than two letters

    Example:
        >>> tokenize_date_pattern("dd/MM")
        (FieldToken(field=<DateField.DAY: 'd'>, width=2), LiteralToken(text='/'),
         FieldToken(field=<DateField.MONTH: 'M'>, width=2))
    """
    tokens: list[Token] = []
    literal: list[str] = []
    pos = 0
    length = len(pattern)

    while pos < length:
        char = pattern[pos]
        if char not in DATE_FIELD_CHARS:
            literal.append(char)
            pos += 1
            continue

        if literal:
            tokens.append(LiteralToken("".join(literal)))
            literal.clear()
        end = pos
        while end < length and pattern[end] == char:
            end += 1
        token = FieldToken(DateField(char), end - pos)
        if token.field is DateField.MONTH and token.width > MAX_NUMERIC_MONTH_WIDTH:
            raise I18nPatternError(
                ErrorTemplate.pattern_unsupported_field(pattern, token.symbol), pattern=pattern
            )
        tokens.append(token)
        pos = end

    if literal:
        tokens.append(LiteralToken("".join(literal)))
    return tuple(tokens)


@lru_cache(maxsize=128)
def parse_cldr_number_pattern(pattern: str) -> babel_numbers.NumberPattern:
    """Parse a number pattern with Babel after validating its digit markers.

    Raises:
        I18nPatternError: If the positive subpattern has more than one
            decimal marker or the pattern has no digit markers
    """
    positive = pattern.split(NEGATIVE_SUBPATTERN_SEPARATOR, 1)[0]
    if positive.count(NUMBER_DECIMAL_MARKER) > 1:
        raise I18nPatternError(
            ErrorTemplate.pattern_multiple_decimal_markers(pattern), pattern=pattern
        )

    try:
        parsed = babel_numbers.parse_pattern(pattern)
    except ValueError as e:
        raise I18nPatternError(
            ErrorTemplate.pattern_invalid(pattern, str(e)), pattern=pattern
        ) from e

    if parsed.int_prec[1] == 0 and parsed.frac_prec[1] == 0:
        raise I18nPatternError(ErrorTemplate.pattern_no_digits(pattern), pattern=pattern)
    return parsed


@lru_cache(maxsize=128)
def tokenize_number_pattern(pattern: str) -> NumberPattern:
    """Summarize a number pattern's digit and grouping markers.

    Args:
        pattern: Number pattern (e.g., "#,##0.00#######")

    Returns:
        NumberPattern describing the pattern

    Raises:
        I18nPatternError: If the pattern has more than one decimal marker or
            no digit markers

    Example:
        >>> p = tokenize_number_pattern("#,##0.00#######")
        >>> (p.min_fraction_digits, p.max_fraction_digits, p.group_size)
        (2, 9, 3)
    """
    parsed = parse_cldr_number_pattern(pattern)
    number = parsed.number_pattern or ""
    integer_side = number.partition(NUMBER_DECIMAL_MARKER)[0]
    min_fraction, max_fraction = parsed.frac_prec

    return NumberPattern(
        pattern=pattern,
        min_integer_digits=parsed.int_prec[0],
        group_size=parsed.grouping[0] if NUMBER_GROUPING_MARKER in integer_side else 0,
        min_fraction_digits=min_fraction,
        max_fraction_digits=max_fraction,
        has_decimal_marker=NUMBER_DECIMAL_MARKER in number,
    )


def tokenize(pattern: str, kind: PatternKind) -> tuple[Token, ...] | NumberPattern:
    """Tokenize a pattern of the given kind.

    Dispatches to tokenize_date_pattern() or tokenize_number_pattern().
    """
    match kind:
        case PatternKind.DATE:
            return tokenize_date_pattern(pattern)
        case PatternKind.NUMBER:
            return tokenize_number_pattern(pattern)
