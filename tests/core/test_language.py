"""Unit tests for core value types."""

import pytest

from bearchat.core import Language, TranslationConfig, TranslationRequest
from bearchat.exceptions import ConfigurationError


class TestLanguage:

    def test_from_code_is_case_insensitive(self):
        assert Language.from_code("JA") is Language.JA
        assert Language.from_code(" zh ") is Language.ZH

    def test_from_code_rejects_unknown_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            Language.from_code("fr")

    def test_every_language_has_display_name(self):
        names = {language.display_name for language in Language}
        assert len(names) == len(Language)
        assert Language.KO.display_name == "Korean"

    def test_str_is_code(self):
        assert str(Language.VI) == "vi"


class TestTranslationRequest:

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_blank_text(self, text):
        request = TranslationRequest(text=text, from_lang=Language.EN, to_lang=Language.ZH)
        assert request.is_blank

    def test_text_is_not_trimmed(self):
        request = TranslationRequest(text="  hi ", from_lang=Language.EN, to_lang=Language.ZH)
        assert not request.is_blank
        assert request.text == "  hi "


class TestTranslationConfig:

    def test_valid_config(self):
        config = TranslationConfig(
            api_key="sk-test", base_url="https://api.example.com/v1/", model_name="gpt-4o-mini"
        )
        assert config.has_api_key
        assert config.completions_url == "https://api.example.com/v1/chat/completions"

    @pytest.mark.parametrize("base_url", ["", "not a url", "api.example.com/v1", "ftp://example.com"])
    def test_invalid_base_url_is_configuration_error(self, base_url):
        with pytest.raises(ConfigurationError):
            TranslationConfig(api_key="k", base_url=base_url, model_name="m")

    def test_empty_model_name_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Model name"):
            TranslationConfig(api_key="k", base_url="https://api.example.com", model_name="  ")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            TranslationConfig(api_key="k", base_url="nope", model_name="m")

    def test_empty_api_key_is_allowed_but_reported(self):
        config = TranslationConfig(api_key="", base_url="https://api.example.com", model_name="m")
        assert not config.has_api_key

    def test_repr_masks_api_key(self):
        config = TranslationConfig(
            api_key="sk-secret", base_url="https://api.example.com", model_name="m"
        )
        assert "sk-secret" not in repr(config)
