"""Pattern-driven number formatting and parsing.

- format_number() renders int/float/Decimal against a CLDR number pattern
  with Babel, then substitutes the separators of a FormatInfo
- parse_number() is the inverse: it strips grouping separators, normalizes
  the decimal separator and returns an exact Decimal

Arithmetic runs on Decimal. Floats enter through their shortest repr, so
123456789.12 is formatted from Decimal('123456789.12') rather than from its
binary expansion. Rounding is ROUND_HALF_UP, and the decimal context is
widened so values beyond 28 significant digits keep every digit.

Python 3.13+. Uses Babel for CLDR number pattern rendering.
"""

from __future__ import annotations

import copy
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import lru_cache
from typing import TYPE_CHECKING

from i18nkit.constants import (
    DEFAULT_GROUP_SIZE,
    NUMBER_DECIMAL_MARKER,
    NUMBER_GROUPING_MARKER,
    NUMBER_SIGNIFICANT_MARKER,
    PATTERN_SYMBOL_LOCALE,
)
from i18nkit.diagnostics import ErrorTemplate, I18nParseError
from i18nkit.formatting.tokenizer import parse_cldr_number_pattern, tokenize_number_pattern
from i18nkit.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel.numbers import NumberPattern as CldrNumberPattern

    from i18nkit.format_info import FormatInfo

__all__ = ["format_number", "parse_number", "to_decimal"]

# What remains after separator normalization must look like this.
# No exponents, no NaN/Infinity: those are Decimal syntax, not display text.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Pattern suffix (everything after the last rendered digit).
_TRAILING_NON_DIGITS = re.compile(r"\D*\Z")

# Digits of headroom for percent/permille scaling and the rounding digit.
_PRECISION_HEADROOM = 5


def to_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Raises:
        TypeError: If value is not int, float or Decimal (bool is rejected)
        ValueError: If value is NaN or infinite
    """
    match value:
        case bool():
            msg = "Cannot format bool as a number"
            raise TypeError(msg)
        case Decimal():
            result = value
        case int():
            result = Decimal(value)
        case float():
            result = Decimal(repr(value))
        case _:
            msg = f"Cannot format {type(value).__name__} as a number"
            raise TypeError(msg)

    if not result.is_finite():
        msg = f"Cannot format non-finite number {value!r}"
        raise ValueError(msg)
    return result


def format_number(value: int | float | Decimal, pattern: str, format_info: FormatInfo) -> str:
    """Format a number against a number pattern.

    Babel renders the value in a locale whose symbols match the pattern
    markers ('.' and ','), which are then replaced by the FormatInfo
    separators:

        1. Round to the pattern's maximum fraction digits (integer if none).
        2. Group integer digits when the locale enables grouping. Patterns
           without a ',' marker group by three.
        3. Trim optional trailing fraction zeros down to the minimum.
        4. Join with the locale decimal separator; a bare trailing separator is
           emitted only when number_decimal_separator_use_always is set and
           no fraction digits remain.

    Args:
        value: Number to format
        pattern: Number pattern (e.g., "#,##0.00#######")
        format_info: Locale separators and flags

    Returns:
        Formatted number string

    Raises:
        I18nPatternError: If the pattern cannot be tokenized
        TypeError: If value is not a number
        ValueError: If value is NaN or infinite

    Examples:
        >>> format_number(123456789.12, "#,##0.00#######", DEFAULT_FORMAT_INFO)
        '123,456,789.12'
        >>> format_number(10000, "#,##0", DEFAULT_FORMAT_INFO)
        '10,000'
    """
    number = tokenize_number_pattern(pattern)
    cldr = _grouped_pattern(pattern)
    exact = to_decimal(value)

    with localcontext() as ctx:
        ctx.prec = max(
            ctx.prec,
            len(exact.as_tuple().digits),
            exact.adjusted() + number.max_fraction_digits + _PRECISION_HEADROOM,
        )
        ctx.rounding = ROUND_HALF_UP
        if NUMBER_SIGNIFICANT_MARKER in (cldr.number_pattern or ""):
            rounds_to_zero = exact.is_zero()
        else:
            quantum = Decimal(1).scaleb(-number.max_fraction_digits - cldr.scale)
            rounds_to_zero = exact.quantize(quantum).is_zero()
        if exact.is_signed() and rounds_to_zero:
            exact = exact.copy_abs()
        rendered = cldr.apply(exact, get_babel_locale(PATTERN_SYMBOL_LOCALE))

    if format_info.number_decimal_separator_use_always and NUMBER_DECIMAL_MARKER not in rendered:
        cut = _TRAILING_NON_DIGITS.search(rendered).start()  # type: ignore[union-attr]
        rendered = f"{rendered[:cut]}{NUMBER_DECIMAL_MARKER}{rendered[cut:]}"

    grouping = (
        format_info.number_grouping_separator if format_info.number_grouping_separator_use else ""
    )
    return rendered.translate(
        str.maketrans(
            {
                NUMBER_DECIMAL_MARKER: format_info.number_decimal_separator,
                NUMBER_GROUPING_MARKER: grouping,
            }
        )
    )


def parse_number(value: str, format_info: FormatInfo) -> Decimal:
    """Parse a locale-formatted number back to an exact Decimal.

    Every grouping separator is removed and the first decimal separator is
    replaced by '.', then the remainder must be a plain decimal literal.
    Surrounding whitespace is ignored.

    Args:
        value: Formatted number (e.g., "10,000.00")
        format_info: Locale separators

    Returns:
        Parsed Decimal

    Raises:
        I18nParseError: If the text is not a number in this locale's format

    Examples:
        >>> parse_number("10,000.", DEFAULT_FORMAT_INFO)
        Decimal('10000')
        >>> parse_number("1.234,5", german_info)
        Decimal('1234.5')
    """
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_input_not_string(value, "number")  # type: ignore[unreachable]
        raise I18nParseError(diagnostic, input_value=str(value), parse_type="number")

    normalized = value.strip()
    if format_info.number_grouping_separator:
        normalized = normalized.replace(format_info.number_grouping_separator, "")
    normalized = normalized.replace(format_info.number_decimal_separator, ".", 1)

    if not _DECIMAL_LITERAL.fullmatch(normalized):
        diagnostic = ErrorTemplate.parse_number_failed(value, "not a decimal number")
        raise I18nParseError(diagnostic, input_value=value, parse_type="number")

    return Decimal(normalized)


@lru_cache(maxsize=128)
def _grouped_pattern(pattern: str) -> CldrNumberPattern:
    """Babel pattern for rendering, grouping by three when the pattern has no ','."""
    cldr = parse_cldr_number_pattern(pattern)
    if tokenize_number_pattern(pattern).group_size:
        return cldr
    grouped = copy.copy(cldr)
    grouped.grouping = (DEFAULT_GROUP_SIZE, DEFAULT_GROUP_SIZE)
    return grouped
