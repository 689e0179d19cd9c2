"""Tests for locale fallback resolution and interpolation."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nkit import FallbackInfo, MessageCatalog
from i18nkit.catalog import LocaleResolver, fallback_chain, interpolate
from tests.strategies import locale_codes


class TestFallbackChain:
    """Test fallback_chain() ordering."""

    def test_region_locale(self) -> None:
        """Active, language, then catalog locales in registration order."""
        assert fallback_chain("de-DE", ["en", "de", "fr"]) == ("de-DE", "de", "en", "fr")

    def test_language_only_locale(self) -> None:
        """A language-only code is its own language segment."""
        assert fallback_chain("de", ["en"]) == ("de", "en")

    def test_posix_code(self) -> None:
        """POSIX separators split the language too."""
        assert fallback_chain("pt_BR", ["pt", "en"]) == ("pt_BR", "pt", "en")

    def test_unrelated_locale_precedes_later_same_language(self) -> None:
        """Registration order decides beyond the language segment."""
        chain = fallback_chain("de-DE", ["fr", "de-AT"])
        assert chain == ("de-DE", "de", "fr", "de-AT")

    @given(active=locale_codes, catalog=st.lists(locale_codes, max_size=6))
    def test_chain_properties(self, active: str, catalog: list[str]) -> None:
        """Chain starts with the active locale, has no duplicates and covers the catalog."""
        chain = fallback_chain(active, catalog)
        assert chain[0] == active
        assert len(chain) == len(set(chain))
        assert set(catalog) <= set(chain)


class TestInterpolate:
    """Test interpolate()."""

    def test_all_placeholders(self) -> None:
        """Every named placeholder is replaced."""
        assert interpolate("min={min}, max={max}", {"min": 10, "max": 100}) == "min=10, max=100"

    def test_no_params(self) -> None:
        """Without params the template is returned unchanged."""
        assert interpolate("min={min}, max={max}", None) == "min={min}, max={max}"

    def test_unknown_placeholder_left_literal(self) -> None:
        """Names missing from params stay as written."""
        assert interpolate("{a} and {b}", {"a": 1}) == "1 and {b}"

    def test_repeated_placeholder(self) -> None:
        """A name used twice is replaced twice."""
        assert interpolate("{x}-{x}", {"x": "y"}) == "y-y"

    def test_values_stringified(self) -> None:
        """Values are rendered with str()."""
        assert interpolate("{v}", {"v": None}) == "None"
        assert interpolate("{v}", {"v": 1.5}) == "1.5"

    def test_values_not_locale_formatted(self) -> None:
        """Whole floats keep their '.0' and booleans stay Python literals."""
        assert interpolate("{n} items", {"n": 10.0}) == "10.0 items"
        assert interpolate("{flag}", {"flag": True}) == "True"

    def test_empty_braces_untouched(self) -> None:
        """Empty braces are not placeholders."""
        assert interpolate("{} {x}", {"x": 1, "": 2}) == "{} 1"

    def test_substituted_value_not_reinterpolated(self) -> None:
        """Replacement text is not scanned again."""
        assert interpolate("{a}", {"a": "{b}", "b": "no"}) == "{b}"

    @given(st.text(alphabet=st.characters(exclude_characters="{}")))
    def test_text_without_braces_unchanged(self, text: str) -> None:
        """Templates without placeholders pass through."""
        assert interpolate(text, {"x": 1}) == text


class TestLocaleResolver:
    """Test LocaleResolver.find() and resolve()."""

    @pytest.fixture
    def catalog(self) -> MessageCatalog:
        """en and de catalog with a shared key and an en-only key."""
        return MessageCatalog(
            [
                {"locales": ["en"], "messages": {"k": "en k", "j": "en j", "n": {"leaf": "x"}}},
                {"locales": ["de"], "messages": {"k": "de k", "n": "de n"}},
            ]
        )

    def test_language_fallback_precedes_other_locales(self, catalog: MessageCatalog) -> None:
        """de-DE resolves k from de even though en was registered first."""
        resolver = LocaleResolver(catalog, "de-DE")
        assert resolver.find("k") == ("de k", "de")
        assert resolver.find("j") == ("en j", "en")

    def test_subtree_is_a_miss(self, catalog: MessageCatalog) -> None:
        """A branch at the path does not stop the chain."""
        resolver = LocaleResolver(catalog, "en")
        assert resolver.find("n") == ("de n", "de")

    def test_unknown_key(self, catalog: MessageCatalog) -> None:
        """No locale has the key."""
        assert LocaleResolver(catalog, "en").resolve("x.y.z") is None

    def test_chain_tracks_later_registrations(self, catalog: MessageCatalog) -> None:
        """Locales registered after construction are searched."""
        resolver = LocaleResolver(catalog, "fr")
        catalog.register("late", [{"locales": ["it"], "messages": {"only": "it"}}])
        assert resolver.chain == ("fr", "en", "de", "it")
        assert resolver.resolve("only") == "it"

    def test_on_fallback_called(self, catalog: MessageCatalog) -> None:
        """A message from another locale is reported."""
        seen: list[FallbackInfo] = []
        resolver = LocaleResolver(catalog, "de-DE", on_fallback=seen.append)
        assert resolver.resolve("k") == "de k"
        assert seen == [FallbackInfo(requested_locale="de-DE", resolved_locale="de", message_key="k")]

    def test_on_fallback_not_called_for_active_locale(self, catalog: MessageCatalog) -> None:
        """Direct hits are not fallbacks."""
        seen: list[FallbackInfo] = []
        LocaleResolver(catalog, "en", on_fallback=seen.append).resolve("k")
        assert seen == []

    def test_find_has_no_side_effects(self, catalog: MessageCatalog) -> None:
        """find() never notifies."""
        seen: list[FallbackInfo] = []
        LocaleResolver(catalog, "de-DE", on_fallback=seen.append).find("j")
        assert seen == []

    def test_miss_logs_warning(
        self, catalog: MessageCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A miss is logged with the searched chain."""
        with caplog.at_level(logging.WARNING, logger="i18nkit.catalog.resolver"):
            LocaleResolver(catalog, "fr").resolve("missing.key")
        assert "Message 'missing.key' not found in locales fr, en, de" in caplog.text

    def test_empty_catalog(self) -> None:
        """An empty catalog resolves nothing."""
        resolver = LocaleResolver(MessageCatalog(), "en-US")
        assert resolver.chain == ("en-US", "en")
        assert resolver.resolve("a") is None
