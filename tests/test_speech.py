"""
Tests for Speech Layer

Tests recognizer error messages and request settings.
"""

import pytest

from nopol.config import NopolConfig
from nopol.speech.errors import (
    RecognitionErrorKind,
    ERROR_MESSAGES,
    UNKNOWN_ERROR_MESSAGE,
    error_kind,
    error_message,
)
from nopol.speech.settings import RecognitionSettings


class TestErrorMessages:
    """Test recognizer error mapping"""

    def test_known_codes(self):
        """Test each platform code"""
        assert error_message(3) == "Error audio. Periksa mikrofon Anda."
        assert error_message(9) == "Izin mikrofon diperlukan."
        assert error_message(RecognitionErrorKind.NO_MATCH) == (
            "Tidak ada suara yang dikenali. Coba ucapkan lebih jelas."
        )

    def test_every_kind_has_distinct_message(self):
        """Test mapping is complete"""
        assert set(ERROR_MESSAGES) == set(RecognitionErrorKind)
        messages = list(ERROR_MESSAGES.values())
        assert len(set(messages)) == len(messages)
        assert UNKNOWN_ERROR_MESSAGE not in messages

    @pytest.mark.parametrize("code", [0, 42, -1, None, "3"])
    def test_unknown_codes(self, code):
        """Test unknown codes fall back to generic message"""
        assert error_message(code) == UNKNOWN_ERROR_MESSAGE
        assert error_kind(code) is None

    def test_error_kind(self):
        """Test resolving codes"""
        assert error_kind(1) is RecognitionErrorKind.NETWORK_TIMEOUT
        assert error_kind(8) is RecognitionErrorKind.RECOGNIZER_BUSY


class TestRecognitionSettings:
    """Test recognizer request settings"""

    def test_defaults(self):
        """Test Indonesian defaults"""
        settings = RecognitionSettings()
        assert settings.language == "id-ID"
        assert settings.max_results == 5
        assert settings.complete_silence_ms == 2000
        assert settings.minimum_length_ms == 1500
        assert settings.prefer_offline is False

    def test_to_extras(self):
        """Test flat extras"""
        extras = RecognitionSettings().to_extras()
        assert extras["language"] == "id-ID"
        assert extras["language_model"] == "web_search"
        assert extras["max_results"] == 5
        assert extras["speech_input_minimum_length_millis"] == 1500

    def test_from_config(self):
        """Test overrides from config"""
        config = NopolConfig(speech_language="en-US", speech_max_results=3)
        settings = RecognitionSettings.from_config(config)
        assert settings.language == "en-US"
        assert settings.language_preference == "en-US"
        assert settings.max_results == 3

    def test_invalid_max_results(self):
        """Test at least one result is requested"""
        with pytest.raises(ValueError):
            RecognitionSettings(max_results=0)
