"""Locale code utilities.

Catalog keys are kept exactly as registered ("en-US", "de", "pt_BR"). These
helpers split a code into its language segment, convert between BCP-47 and
POSIX spellings, and bridge to Babel for CLDR lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "language_of",
    "normalize_locale",
    "to_bcp47",
]


def language_of(locale_code: str) -> str:
    """Return the language segment of a locale code.

    The language is the text before the first '-' (or '_', for POSIX-style
    codes). A code without a region is its own language.

    Example:
        >>> language_of("de-DE")
        'de'
        >>> language_of("pt_BR")
        'pt'
        >>> language_of("en")
        'en'
    """
    return locale_code.replace("_", "-").split("-", 1)[0]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert POSIX locale code to BCP-47 format.

    Example:
        >>> to_bcp47("de_DE")
        'de-DE'
    """
    return locale_code.replace("_", "-")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    "C" and "POSIX" pseudo-locales are skipped and encoding suffixes
    (".UTF-8") are stripped.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected locale code in BCP-47 format (e.g., "de-DE")

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        code = (system_locale or "").split(".")[0]
        if code and code not in ("C", "POSIX"):
            return to_bcp47(code)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        code = os.environ.get(var, "").split(".")[0]
        if code and code not in ("C", "POSIX"):
            return to_bcp47(code)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en-US"
