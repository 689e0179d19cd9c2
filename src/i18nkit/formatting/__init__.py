"""Pattern-driven date and number formatting.

Inverse pairs:
    format_number  <-> parse_number    (number patterns such as "#,##0.00#")
    format_date    <-> parse_datetime  (date patterns such as "dd/MM/yyyy")

Patterns are tokenized once and cached (see tokenizer).

Rendering is delegated to Babel (CLDR number patterns, DateTimeFormat fields);
parsing is local and strict.

Python 3.13+.
"""

from .dates import format_date, parse_datetime
from .numbers import format_number, parse_number, to_decimal
from .tokenizer import (
    DateField,
    FieldToken,
    LiteralToken,
    NumberPattern,
    PatternKind,
    Token,
    parse_cldr_number_pattern,
    tokenize,
    tokenize_date_pattern,
    tokenize_number_pattern,
)

__all__ = [
    # Tokenizer
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
    # Formatting / parsing
    "format_date",
    "format_number",
    "parse_datetime",
    "parse_number",
    "to_decimal",
]
