"""Unit tests for the capability registry."""

import pytest

from autotranslate.core.capabilities import CapabilitySet, normalize_codes
from autotranslate.core.models import LanguageEntry


@pytest.fixture
def capabilities():
    return CapabilitySet.from_languages([
        LanguageEntry("EN-US", "English (American)", False),
        LanguageEntry("DE", "German", True),
        LanguageEntry("PT-BR", "Portuguese (Brazilian)", True),
    ])


class TestNormalizeCodes:
    """Test code normalization."""

    def test_full_and_base_codes_lowercased(self):
        assert normalize_codes(["EN-US", "DE"]) == frozenset({"en-us", "en", "de"})

    def test_empty(self):
        assert normalize_codes([]) == frozenset()


class TestCapabilitySet:
    """Test language and formality lookups."""

    @pytest.mark.parametrize("code", ["en-us", "EN-US", "En-Us", "en", "EN"])
    def test_regional_and_base_code_supported(self, capabilities, code):
        assert capabilities.supports_language(code)

    def test_other_regions_of_base_code(self, capabilities):
        """Only advertised variants and their base are known."""
        assert capabilities.supports_language("pt")
        assert capabilities.supports_language("pt-br")
        assert not capabilities.supports_language("pt-pt")

    def test_unknown_language(self, capabilities):
        assert not capabilities.supports_language("fr")

    def test_formality_lookup(self, capabilities):
        assert capabilities.supports_formality("de")
        assert capabilities.supports_formality("PT")
        assert capabilities.supports_formality("pt-BR")
        assert not capabilities.supports_formality("en")
        assert not capabilities.supports_formality("en-us")

    def test_formality_requires_catalog_entry(self, capabilities):
        assert not capabilities.supports_formality("fr")

    def test_sets_are_immutable(self, capabilities):
        assert isinstance(capabilities.languages, frozenset)
        assert isinstance(capabilities.formality_languages, frozenset)
        with pytest.raises(AttributeError):
            capabilities.languages = frozenset()

    def test_empty_catalog(self):
        empty = CapabilitySet.from_languages([])
        assert not empty.supports_language("en")
        assert not empty.supports_formality("de")


class TestLanguageEntry:
    """Test catalog parsing."""

    def test_from_dict(self):
        entry = LanguageEntry.from_dict({"language": "ES", "name": "Spanish", "supports_formality": True})
        assert entry == LanguageEntry("ES", "Spanish", True)

    def test_from_dict_defaults(self):
        entry = LanguageEntry.from_dict({"language": "JA"})
        assert entry.name == ""
        assert entry.supports_formality is False

    @pytest.mark.parametrize("code", [None, 42, ""])
    def test_from_dict_rejects_invalid_code(self, code):
        with pytest.raises(ValueError):
            LanguageEntry.from_dict({"language": code})
