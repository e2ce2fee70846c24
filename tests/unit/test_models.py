"""Unit tests for the translation value types."""

import dataclasses

import pytest

from i18n_proxy.app.translation.models import Language, TranslationResult


@pytest.mark.unit
class TestLanguage:
    def test_equal_when_codes_match(self):
        assert Language("fr") == Language("fr")
        assert hash(Language("fr")) == hash(Language("fr"))

    def test_codes_compare_case_sensitively(self):
        assert Language("fr") != Language("FR")

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Language("fr").code = "en"

    def test_str_is_code(self):
        assert str(Language("ar")) == "ar"


@pytest.mark.unit
def test_missing_result_has_no_values():
    result = TranslationResult.missing()
    assert result.native_key is None
    assert result.foreign_value is None
