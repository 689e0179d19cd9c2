"""Locale fallback resolution and placeholder interpolation.

Resolution order for an active locale such as "de-DE":

    1. the active locale itself             ("de-DE")
    2. its language segment                 ("de")
    3. every other catalog locale, in the order it was first registered

Duplicates are skipped. The first locale whose tree holds a *string* at the
key path wins; a subtree at that path counts as a miss for that locale and
the chain continues. If nothing matches, the caller gets the key back.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from i18nkit.constants import KEY_SEPARATOR, PLACEHOLDER_PATTERN
from i18nkit.diagnostics import ErrorTemplate
from i18nkit.locale_utils import language_of

if TYPE_CHECKING:
    from i18nkit.catalog.catalog import MessageCatalog

__all__ = [
    "FallbackInfo",
    "LocaleResolver",
    "fallback_chain",
    "interpolate",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """A message resolved from a locale other than the active one.

    Attributes:
        requested_locale: The active locale
        resolved_locale: The locale that supplied the message
        message_key: The dotted key that was looked up
    """

    requested_locale: str
    resolved_locale: str
    message_key: str


def fallback_chain(active_locale: str, catalog_locales: Iterable[str]) -> tuple[str, ...]:
    """Compute the ordered, duplicate-free list of locales to search.

    Example:
        >>> fallback_chain("de-DE", ["en", "de", "fr"])
        ('de-DE', 'de', 'en', 'fr')
    """
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys((active_locale, language_of(active_locale), *catalog_locales)))


def interpolate(template: str, params: Mapping[str, Any] | None) -> str:
    """Replace {name} placeholders with str(params[name]).

    Placeholders whose name is not in params are left as written. Values
    render with Python's str(): 10.0 stays "10.0" and True, None render as
    "True", "None". Format numbers with I18nManager.format_number() first when
    locale-aware output is wanted.

    Example:
        >>> interpolate("min={min}, max={max}", {"min": 10, "max": 100})
        'min=10, max=100'
        >>> interpolate("Hello, {name}", {})
        'Hello, {name}'
    """
    if params is None:
        return template

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


class LocaleResolver:
    """Resolves dotted keys against a catalog for one active locale.

    The chain is recomputed on every lookup so locales registered later are
    picked up.
    """

    __slots__ = ("_active_locale", "_catalog", "_on_fallback")

    def __init__(
        self,
        catalog: MessageCatalog,
        active_locale: str,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        self._catalog = catalog
        self._active_locale = active_locale
        self._on_fallback = on_fallback

    @property
    def chain(self) -> tuple[str, ...]:
        """Locales searched for every lookup, in order."""
        return fallback_chain(self._active_locale, self._catalog.locales)

    def find(self, key: str) -> tuple[str, str] | None:
        """Locate the string for key without side effects.

        Returns:
            (message, locale) for the first locale holding a string at the
            key path, or None
        """
        path = key.split(KEY_SEPARATOR)
        for locale_code in self.chain:
            match self._catalog.lookup(locale_code, path):
                case str() as message:
                    return message, locale_code
                case _:
                    continue
        return None

    def resolve(self, key: str) -> str | None:
        """Return the message for key, or None when no locale has it.

        Logs a warning on a miss and notifies on_fallback when the message
        came from a locale other than the active one.
        """
        found = self.find(key)
        if found is None:
            logger.warning("%s", ErrorTemplate.message_not_found(key, self.chain))
            return None

        message, locale_code = found
        if locale_code != self._active_locale:
            logger.debug(
                "Message '%s' resolved from fallback locale '%s' (requested '%s')",
                key,
                locale_code,
                self._active_locale,
            )
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        requested_locale=self._active_locale,
                        resolved_locale=locale_code,
                        message_key=key,
                    )
                )
        return message
