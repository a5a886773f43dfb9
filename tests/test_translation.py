"""
Unit tests for translation.py - Translation request handoff.
"""
import os
import sys
import pytest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from cliptrans.core.language import Language
from cliptrans.core.translation import (
    TranslationError, build_translation_request, get_api_key, system_prompt_for
)


class TestBuildTranslationRequest:
    """Tests for build_translation_request."""

    def test_request_fields(self):
        """Test that endpoint, model and prompt come from config and target."""
        config = Config(api_url="https://api.example.com/v1", model_version="model-x")
        request = build_translation_request("Hola", Language.ENGLISH, config, api_key="sk-test")

        assert request.text == "Hola"
        assert request.target == Language.ENGLISH
        assert request.api_url == "https://api.example.com/v1"
        assert request.model_version == "model-x"
        assert request.api_key == "sk-test"
        assert "translates text into English" in request.system_prompt

    def test_api_key_not_in_repr(self):
        """Test that the key does not leak into logs via repr."""
        request = build_translation_request("Hola", Language.ENGLISH, Config(), api_key="sk-secret")
        assert "sk-secret" not in repr(request)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_text_raises(self, text):
        """Test that empty clipboard text is rejected."""
        with pytest.raises(TranslationError):
            build_translation_request(text, Language.ENGLISH, Config(), api_key="")

    def test_system_prompt(self):
        """Test the prompt wording."""
        prompt = system_prompt_for(Language.UKRAINIAN)
        assert prompt.startswith("You are a helpful assistant that translates text into Ukrainian.")


class TestApiKey:
    """Tests for API key lookup."""

    def test_primary_variable(self):
        """Test TRANSLATOR_API_KEY takes precedence."""
        env = {'TRANSLATOR_API_KEY': 'first', 'OPENAI_API_KEY': 'second'}
        with patch.dict(os.environ, env, clear=True):
            assert get_api_key() == 'first'

    def test_fallback_variable(self):
        """Test OPENAI_API_KEY is used when the primary is absent."""
        with patch.dict(os.environ, {'OPENAI_API_KEY': 'second'}, clear=True):
            assert get_api_key() == 'second'

    def test_missing(self):
        """Test empty string when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_api_key() == ''
