"""i18nkit - locale-aware messages, dates and numbers for component-based apps.

Each component registers its own message bundles; lookups resolve against a
single active locale with a deterministic fallback chain. Dates and numbers
are formatted and parsed through small token patterns ("dd/MM/yyyy",
"#,##0.00#######") with exact round-trips.

Public API:
    I18nManager - Message lookup, interpolation, date/number formatting
    MessageBundle - Locale codes plus a message tree
    MessageCatalog - Multi-locale catalog (shareable between managers)
    FormatInfo - Per-locale patterns and separators
    FormatInfoRegistry - Locale -> FormatInfo table with defaults
    DEFAULT_FORMAT_INFO - Process-wide default FormatInfo
    FallbackInfo - Record passed to on_fallback callbacks

Exceptions:
    I18nError - Base exception class
    I18nParseError - Text does not match a date/number pattern
    I18nPatternError - Malformed or unsupported pattern

Submodules:
    i18nkit.formatting - Pattern tokenizer and date/number formatters
    i18nkit.catalog - Bundles, catalog and locale resolver
    i18nkit.diagnostics - Diagnostic codes and error templates
    i18nkit.locale_utils - Locale code helpers
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .catalog import FallbackInfo, MessageBundle, MessageCatalog
from .diagnostics import I18nError, I18nParseError, I18nPatternError
from .format_info import DEFAULT_FORMAT_INFO, FormatInfo, FormatInfoRegistry
from .manager import I18nManager

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("i18nkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_FORMAT_INFO",
    "FallbackInfo",
    "FormatInfo",
    "FormatInfoRegistry",
    "I18nError",
    "I18nManager",
    "I18nParseError",
    "I18nPatternError",
    "MessageBundle",
    "MessageCatalog",
    "__version__",
]
