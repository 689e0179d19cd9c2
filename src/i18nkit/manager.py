"""I18nManager: message lookup and date/number formatting for one locale.

Composes the pieces of the library behind one object:

- MessageCatalog: bundles registered by independent components
- LocaleResolver: fallback chain and first-string-wins lookup
- FormatInfoRegistry: per-locale patterns and separators
- formatting: pattern-driven date and number formatting/parsing

Key architectural decisions:
- The active locale is fixed for the lifetime of a manager. Use
  with_locale() to get a manager for another locale over the same catalog.
- The catalog is owned by the manager and passed explicitly when shared;
  there is no module-level catalog.
- register() extends the catalog in place and returns the same manager, so
  calls can be chained.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Self, TypeAlias

from i18nkit.catalog import FallbackInfo, LocaleResolver, MessageCatalog
from i18nkit.catalog.catalog import BundleInput
from i18nkit.catalog.resolver import interpolate
from i18nkit.format_info import FormatInfo, FormatInfoRegistry
from i18nkit.formatting import format_date, format_number, parse_datetime, parse_number
from i18nkit.locale_utils import get_system_locale

__all__ = ["I18nManager"]

FormatInfoInput: TypeAlias = FormatInfoRegistry | Mapping[str, FormatInfo | Mapping[str, object]]


class I18nManager:
    """Locale-aware message lookup and formatting facade.

    Example:
        >>> i18n = I18nManager("en-US", [
        ...     {"locales": ["en-US"], "messages": {"test": "test"}},
        ... ])
        >>> i18n = i18n.register("component", [
        ...     {"locales": ["en-US"], "messages": {"component": {"format": "min={min}"}}},
        ... ])
        >>> i18n.get_message("component.format", {"min": 10})
        'min=10'
        >>> i18n.get_message("component.missing")
        'component.missing'
        >>> i18n.format_number(10000)
        '10,000'

    Thread Safety:
        Formatting and lookups are read-only. register() may run while other
        threads read: the catalog publishes merged trees atomically.
    """

    __slots__ = ("_catalog", "_format_infos", "_locale", "_on_fallback", "_resolver")

    def __init__(
        self,
        locale: str,
        bundles: Iterable[BundleInput] | None = None,
        format_infos: FormatInfoInput | None = None,
        *,
        catalog: MessageCatalog | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize manager.

        Args:
            locale: Active locale code (e.g., "en-US")
            bundles: Initial message bundles. None is treated as empty.
            format_infos: Locale code -> FormatInfo (or partial mapping), or a
                ready FormatInfoRegistry to share. None is treated as empty.
            catalog: Existing catalog to share; bundles are registered into it
            on_fallback: Called with FallbackInfo whenever a message comes
                from a locale other than the active one

        Raises:
            ValueError: If locale is empty or format info is invalid
            TypeError: If a bundle is malformed
        """
        if not isinstance(locale, str) or not locale:
            msg = f"Active locale must be a non-empty string, got {locale!r}"
            raise ValueError(msg)

        self._locale = locale
        self._catalog = catalog if catalog is not None else MessageCatalog()
        if bundles:
            self._catalog.register("", bundles)

        match format_infos:
            case FormatInfoRegistry():
                self._format_infos = format_infos
            case _:
                self._format_infos = FormatInfoRegistry(format_infos)

        self._on_fallback = on_fallback
        self._resolver = LocaleResolver(self._catalog, locale, on_fallback=on_fallback)

    @classmethod
    def for_system_locale(
        cls,
        bundles: Iterable[BundleInput] | None = None,
        format_infos: FormatInfoInput | None = None,
        **kwargs: Any,
    ) -> I18nManager:
        """Create a manager whose active locale is the process locale.

        See locale_utils.get_system_locale() for the detection order.
        """
        return cls(get_system_locale(), bundles, format_infos, **kwargs)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def register(self, namespace: str, bundles: Iterable[BundleInput]) -> Self:
        """Register a component's message bundles.

        Args:
            namespace: Registering component name (used for logging only)
            bundles: MessageBundle objects or {"locales", "messages"} mappings

        Returns:
            This manager, for chaining

        Raises:
            TypeError: If a bundle is malformed (catalog left unchanged)
            ValueError: If a key segment is invalid (catalog left unchanged)
        """
        self._catalog.register(namespace, bundles)
        return self

    def with_locale(self, locale: str) -> I18nManager:
        """Return a manager for another locale sharing this catalog and format info."""
        return I18nManager(
            locale,
            format_infos=self._format_infos,
            catalog=self._catalog,
            on_fallback=self._on_fallback,
        )

    def get_message(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        """Look up a dotted message key.

        Args:
            key: Dotted key (e.g., "component.subcomponent.label")
            params: Values for {name} placeholders. Unknown placeholders stay
                literal; without params the template is returned as-is.

        Returns:
            The resolved (and interpolated) message, or key itself when no
            locale in the fallback chain holds a string at that path
        """
        message = self._resolver.resolve(key)
        if message is None:
            return key
        return interpolate(message, params)

    def has_message(self, key: str) -> bool:
        """Whether get_message(key) would resolve to a catalog string."""
        return self._resolver.find(key) is not None

    @property
    def locale(self) -> str:
        """Active locale code."""
        return self._locale

    @property
    def locales(self) -> tuple[str, ...]:
        """Catalog locales in order of first registration."""
        return self._catalog.locales

    @property
    def fallback_chain(self) -> tuple[str, ...]:
        """Locales searched by get_message(), in order."""
        return self._resolver.chain

    @property
    def catalog(self) -> MessageCatalog:
        """The (possibly shared) message catalog."""
        return self._catalog

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @property
    def format_info(self) -> FormatInfo:
        """Effective FormatInfo for the active locale."""
        return self._format_infos.get(self._locale)

    @property
    def date_format(self) -> str:
        """Date pattern of the active locale (or the default pattern)."""
        return self.format_info.date_pattern

    def format_date(self, value: date | datetime) -> str:
        """Format with the locale's date pattern."""
        return format_date(value, self.format_info.date_pattern)

    def format_datetime(self, value: date | datetime) -> str:
        """Format with the locale's date-time pattern."""
        return format_date(value, self.format_info.date_time_pattern)

    def parse_date(self, value: str) -> date:
        """Parse text in the locale's date pattern.

        Raises:
            I18nParseError: If the text does not match the pattern
        """
        return parse_datetime(value, self.format_info.date_pattern, parse_type="date").date()

    def parse_datetime(self, value: str) -> datetime:
        """Parse text in the locale's date-time pattern.

        Raises:
            I18nParseError: If the text does not match the pattern
        """
        return parse_datetime(value, self.format_info.date_time_pattern)

    def format_number(self, value: int | float | Decimal) -> str:
        """Format with the locale's integer pattern."""
        info = self.format_info
        return format_number(value, info.integer_pattern, info)

    def format_decimal_number(self, value: int | float | Decimal) -> str:
        """Format with the locale's decimal number pattern."""
        info = self.format_info
        return format_number(value, info.number_pattern, info)

    def parse_number(self, value: str) -> float:
        """Parse text produced by format_number().

        Raises:
            I18nParseError: If the text is not a number in this locale
        """
        return float(parse_number(value, self.format_info))

    def parse_decimal_number(self, value: str) -> float:
        """Parse text produced by format_decimal_number().

        Raises:
            I18nParseError: If the text is not a number in this locale
        """
        return float(parse_number(value, self.format_info))

    def parse_decimal(self, value: str) -> Decimal:
        """Parse a locale-formatted number without float rounding.

        Raises:
            I18nParseError: If the text is not a number in this locale
        """
        return parse_number(value, self.format_info)

    def __repr__(self) -> str:
        return f"I18nManager(locale={self._locale!r}, locales={self.locales!r})"
