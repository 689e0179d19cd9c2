"""Tests for the I18nManager facade."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import pytest

from i18nkit import (
    DEFAULT_FORMAT_INFO,
    FallbackInfo,
    FormatInfoRegistry,
    I18nManager,
    I18nParseError,
    MessageCatalog,
)

EN_US_FORMAT = {
    "datePattern": "dd/MM/yyyy",
    "dateTimePattern": "dd/MM/yyyy HH:mm:ss",
    "integerPattern": "#,##0",
    "numberPattern": "#,##0.00#######",
    "numberDecimalSeparator": ".",
    "numberGroupingSeparator": ",",
    "numberGroupingSeparatorUse": True,
}

BASE_BUNDLE = {
    "locales": ["en-US"],
    "messages": {"test": "test", "subcomponent": {"hint": "nested hint"}},
}

COMPONENT_BUNDLE = {
    "locales": ["en-US"],
    "messages": {
        "component": {
            "test": "test component",
            "format": "min={min}, max={max}",
            "subcomponent": {"label": "nested"},
        },
    },
}


def _manager(**format_overrides: Any) -> I18nManager:
    i18n = I18nManager("en-US", [BASE_BUNDLE], {"en-US": {**EN_US_FORMAT, **format_overrides}})
    return i18n.register("component", [COMPONENT_BUNDLE])


@pytest.fixture
def i18n() -> I18nManager:
    """en-US manager with base and component bundles."""
    return _manager()


class TestMessages:
    """Test message lookup through the manager."""

    def test_top_level_message(self, i18n: I18nManager) -> None:
        """Plain key resolves."""
        assert i18n.get_message("test") == "test"

    def test_component_message(self, i18n: I18nManager) -> None:
        """Keys from a registered component resolve."""
        assert i18n.get_message("component.test") == "test component"
        assert i18n.get_message("component.subcomponent.label") == "nested"
        assert i18n.get_message("subcomponent.hint") == "nested hint"

    def test_object_message_returns_key(self, i18n: I18nManager) -> None:
        """A key naming a subtree resolves to the key itself."""
        assert i18n.get_message("component") == "component"

    def test_unknown_key_returns_key(self) -> None:
        """Empty catalog returns keys verbatim."""
        assert I18nManager("en").get_message("x.y.z") == "x.y.z"

    def test_formatted_message(self, i18n: I18nManager) -> None:
        """Placeholders are filled only when params are given."""
        assert i18n.get_message("component.format") == "min={min}, max={max}"
        assert i18n.get_message("component.format", {"min": 10, "max": 100}) == "min=10, max=100"

    def test_register_returns_same_manager(self) -> None:
        """register() is chainable."""
        i18n = I18nManager("en")
        assert i18n.register("a", []) is i18n

    def test_fallback_between_region_and_language(self) -> None:
        """de-DE finds de first, then any other registered locale."""
        de_i18n = I18nManager("de-DE", [], {})
        de_i18n.register(
            "test_component",
            [
                {
                    "locales": ["en"],
                    "messages": {
                        "component": {
                            "testMessage1": "en test message 1",
                            "testMessage2": "en test message 2",
                        },
                    },
                },
                {
                    "locales": ["de"],
                    "messages": {"component": {"testMessage2": "de test message 2"}},
                },
            ],
        )

        assert de_i18n.get_message("component.testMessage1") == "en test message 1"
        assert de_i18n.get_message("component.testMessage2") == "de test message 2"
        assert de_i18n.get_message("component.testMessage3") == "component.testMessage3"

    def test_fallback_to_other_language(self) -> None:
        """Nothing for de: the en message is used."""
        i18n = I18nManager("de", [{"locales": ["en"], "messages": {"a": "fallback"}}])
        assert i18n.get_message("a") == "fallback"

    def test_has_message(self, i18n: I18nManager) -> None:
        """has_message() mirrors get_message() resolution."""
        assert i18n.has_message("component.test")
        assert not i18n.has_message("component")
        assert not i18n.has_message("nope")

    def test_on_fallback_hook(self) -> None:
        """on_fallback receives the resolving locale."""
        seen: list[FallbackInfo] = []
        i18n = I18nManager(
            "de-AT",
            [{"locales": ["de"], "messages": {"k": "v"}}],
            on_fallback=seen.append,
        )
        i18n.get_message("k")
        assert seen == [FallbackInfo("de-AT", "de", "k")]

    def test_properties(self, i18n: I18nManager) -> None:
        """locale, locales and fallback_chain reflect the catalog."""
        assert i18n.locale == "en-US"
        assert i18n.locales == ("en-US",)
        assert i18n.fallback_chain == ("en-US", "en")
        assert "en-US" in repr(i18n)

    @pytest.mark.parametrize("locale", ["", None, 5])
    def test_invalid_locale(self, locale: Any) -> None:
        """Active locale must be a non-empty string."""
        with pytest.raises(ValueError, match="non-empty string"):
            I18nManager(locale)

    def test_malformed_bundle_rejected(self) -> None:
        """Non-string leaves fail registration."""
        with pytest.raises(TypeError):
            I18nManager("en", [{"locales": ["en"], "messages": {"n": 1}}])


class TestSharedCatalog:
    """Test managers that share one catalog."""

    def test_with_locale_shares_catalog(self, i18n: I18nManager) -> None:
        """Registrations through either manager are visible to both."""
        de = i18n.with_locale("de")
        de.register("de", [{"locales": ["de"], "messages": {"test": "Test"}}])

        assert de.catalog is i18n.catalog
        assert de.get_message("test") == "Test"
        assert i18n.get_message("test") == "test"
        assert i18n.locales == ("en-US", "de")

    def test_with_locale_shares_format_infos(self, i18n: I18nManager) -> None:
        """Format info registry is carried over."""
        assert i18n.with_locale("en-US").format_info == i18n.format_info
        assert i18n.with_locale("fr").format_info is DEFAULT_FORMAT_INFO

    def test_explicit_catalog(self) -> None:
        """A catalog passed in receives the initial bundles."""
        catalog = MessageCatalog()
        I18nManager("en", [{"locales": ["en"], "messages": {"k": "v"}}], catalog=catalog)
        assert catalog.lookup("en", ("k",)) == "v"

    def test_registry_instance_accepted(self) -> None:
        """A ready FormatInfoRegistry is used as-is."""
        registry = FormatInfoRegistry({"es": {"datePattern": "dd-MM-yyyy"}})
        assert I18nManager("es", format_infos=registry).date_format == "dd-MM-yyyy"


class TestDates:
    """Test date formatting through the manager."""

    def test_format_and_parse_date(self, i18n: I18nManager) -> None:
        """dd/MM/yyyy round-trips a calendar date."""
        value = date(2001, 1, 10)
        text = i18n.format_date(value)
        assert text == "10/01/2001"
        assert i18n.parse_date(text) == value

    def test_format_datetime_of_date(self, i18n: I18nManager) -> None:
        """A plain date renders midnight."""
        assert i18n.format_datetime(date(2001, 1, 10)) == "10/01/2001 00:00:00"

    def test_datetime_round_trip(self, i18n: I18nManager) -> None:
        """Date-time pattern round-trips whole seconds."""
        value = datetime(2001, 1, 10, 13, 5, 9)
        assert i18n.parse_datetime(i18n.format_datetime(value)) == value

    def test_parse_date_error(self, i18n: I18nManager) -> None:
        """Impossible dates raise I18nParseError tagged as date."""
        with pytest.raises(I18nParseError) as exc_info:
            i18n.parse_date("31/02/2001")
        assert exc_info.value.parse_type == "date"
        assert exc_info.value.input_value == "31/02/2001"

    def test_configured_date_format(self) -> None:
        """date_format returns the configured pattern verbatim."""
        i18n = I18nManager("es", None, {"es": {**EN_US_FORMAT, "datePattern": "YY"}})
        assert i18n.date_format == "YY"

    def test_default_date_format(self) -> None:
        """Unconfigured locales use the default pattern."""
        assert I18nManager("en", None).date_format == DEFAULT_FORMAT_INFO.date_pattern


class TestNumbers:
    """Test number formatting through the manager."""

    def test_format_and_parse_numbers(self, i18n: I18nManager) -> None:
        """Integer and decimal patterns format and parse back."""
        assert i18n.format_number(10000) == "10,000"
        assert i18n.parse_number("10,000") == 10000

        assert i18n.format_decimal_number(10000) == "10,000.00"
        assert i18n.parse_decimal_number("10,000.00") == 10000

        assert i18n.format_decimal_number(123456789.12) == "123,456,789.12"
        assert i18n.format_decimal_number(55454545.12) == "55,454,545.12"

    def test_use_always_with_integer_pattern(self) -> None:
        """Bare separator is appended when the pattern has no fraction."""
        i18n = _manager(numberDecimalSeparatorUseAlways=True)
        assert i18n.format_number(10000) == "10,000."
        assert i18n.parse_number("10,000") == 10000
        assert i18n.parse_number("10,000.") == 10000

    def test_use_always_with_fraction_pattern(self) -> None:
        """A pattern with fraction digits renders them as usual."""
        i18n = _manager(numberDecimalSeparatorUseAlways=True, integerPattern="#,##0.00")
        assert i18n.format_number(10000) == "10,000.00"
        assert i18n.parse_number("10,000.00") == 10000

    def test_parse_decimal_is_exact(self, i18n: I18nManager) -> None:
        """parse_decimal() keeps every digit."""
        assert i18n.parse_decimal("123,456,789.123456789") == Decimal("123456789.123456789")

    def test_format_decimal_keeps_long_values_exact(self) -> None:
        """Decimals longer than the default context precision are not rounded."""
        i18n = I18nManager("en")
        value = Decimal("12345678901234567890.123456789")
        assert i18n.format_decimal_number(value) == "12,345,678,901,234,567,890.123456789"
        assert i18n.parse_decimal(i18n.format_decimal_number(value)) == value

    def test_parse_number_returns_float(self, i18n: I18nManager) -> None:
        """parse_number() yields float."""
        assert isinstance(i18n.parse_number("1,234.5"), float)

    def test_locale_separators(self) -> None:
        """Separators follow the active locale's format info."""
        i18n = I18nManager(
            "de-DE",
            format_infos={"de-DE": {"numberDecimalSeparator": ",", "numberGroupingSeparator": "."}},
        )
        assert i18n.format_decimal_number(1234.5) == "1.234,50"
        assert i18n.parse_decimal_number("1.234,50") == 1234.5

    def test_parse_number_error(self, i18n: I18nManager) -> None:
        """Garbage text raises I18nParseError."""
        with pytest.raises(I18nParseError):
            i18n.parse_number("ten")


class TestSystemLocale:
    """Test for_system_locale()."""

    def test_uses_detected_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The detected code becomes the active locale."""
        monkeypatch.setattr("i18nkit.manager.get_system_locale", lambda: "lv-LV")
        i18n = I18nManager.for_system_locale([{"locales": ["lv"], "messages": {"k": "v"}}])
        assert i18n.locale == "lv-LV"
        assert i18n.get_message("k") == "v"
