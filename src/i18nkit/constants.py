"""Shared constants for i18nkit.

Centralized configuration constants used by the catalog, the resolver and
the formatters. Placing constants here avoids circular imports between the
subpackages.

Constants are grouped by domain:
- Depth limits: Recursion protection for message tree merging
- Pattern markers: Characters with structural meaning in number/date patterns
- Interpolation: Placeholder syntax for message parameters

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Pattern markers
    "DATE_FIELD_CHARS",
    "NUMBER_DECIMAL_MARKER",
    "NUMBER_GROUPING_MARKER",
    "NEGATIVE_SUBPATTERN_SEPARATOR",
    "NUMBER_SIGNIFICANT_MARKER",
    "DEFAULT_GROUP_SIZE",
    "MAX_NUMERIC_MONTH_WIDTH",
    "PATTERN_SYMBOL_LOCALE",
    # Interpolation
    "KEY_SEPARATOR",
    "PLACEHOLDER_PATTERN",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth of a message tree.
# Real catalogs nest 2-5 levels; anything beyond 100 is malformed input and
# would otherwise surface as RecursionError during the recursive merge.
MAX_DEPTH: int = 100

# ============================================================================
# PATTERN MARKERS
# ============================================================================

# Letters that form date field tokens. Everything else is literal text.
DATE_FIELD_CHARS: frozenset[str] = frozenset("dMyHms")

# Number pattern structure. The decimal and grouping markers are fixed in the
# pattern regardless of the separators the locale renders.
NUMBER_DECIMAL_MARKER: str = "."
NUMBER_GROUPING_MARKER: str = ","
NEGATIVE_SUBPATTERN_SEPARATOR: str = ";"
NUMBER_SIGNIFICANT_MARKER: str = "@"

# Group width used when a pattern carries no grouping marker of its own.
DEFAULT_GROUP_SIZE: int = 3

# Longer month runs ("MMM") are CLDR month names, not digits.
MAX_NUMERIC_MONTH_WIDTH: int = 2

# CLDR locale whose decimal (".") and group (",") symbols coincide with the
# pattern markers. Babel renders in this locale; FormatInfo separators are
# substituted afterwards.
PATTERN_SYMBOL_LOCALE: str = "en"

# ============================================================================
# INTERPOLATION
# ============================================================================

# Separator between segments of a dotted message key ("component.test").
KEY_SEPARATOR: str = "."

# {name} placeholders. Names cannot contain braces.
PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{([^{}]+)\}")
