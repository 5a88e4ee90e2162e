"""Tests for the locale registry."""

import pytest

from chefai.i18n import DEFAULT_LOCALE, REGISTRY, SUPPORTED_LOCALES, Locale, LocaleRegistry


class TestRegistryConfig:
    def test_default_locale_is_spanish(self):
        assert DEFAULT_LOCALE == "es"
        assert REGISTRY.default == "es"

    def test_supported_locales(self):
        assert SUPPORTED_LOCALES == ("es", "en", "fr", "de", "it")

    def test_default_is_supported(self):
        assert REGISTRY.default in REGISTRY

    def test_membership(self):
        assert "fr" in REGISTRY
        assert "pt" not in REGISTRY
        assert "" not in REGISTRY

    def test_every_locale_has_names(self):
        for locale in Locale:
            assert REGISTRY.display_name(locale)
            assert REGISTRY.ai_language(locale)


class TestRegistryLookups:
    def test_display_name(self):
        assert REGISTRY.display_name("de") == "Deutsch"
        assert REGISTRY.display_name("es") == "Español"

    def test_ai_language(self):
        assert REGISTRY.ai_language("it") == "Italian"
        assert REGISTRY.ai_language("en") == "English"

    def test_unknown_code_falls_back_to_default(self):
        assert REGISTRY.display_name("xx") == "Español"
        assert REGISTRY.ai_language("xx") == "Spanish"


class TestRegistryValidation:
    def test_default_must_be_supported(self):
        with pytest.raises(ValueError, match="not a supported locale"):
            LocaleRegistry(
                locales=("en",),
                default="es",
                names={"en": "English"},
                ai_languages={"en": "English"},
            )

    def test_missing_names_rejected(self):
        with pytest.raises(ValueError, match="names missing"):
            LocaleRegistry(
                locales=("en", "es"),
                default="en",
                names={"en": "English"},
                ai_languages={"en": "English", "es": "Spanish"},
            )

    def test_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            REGISTRY.names["xx"] = "Nope"
