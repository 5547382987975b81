"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from tewahed.config import Settings, ThreadSettings


class TestThreadSettings:
    """Tests for ThreadSettings bounds."""

    def test_defaults(self):
        settings = ThreadSettings()

        assert settings.max_level == 2
        assert settings.author_delete_window_seconds == 3600
        assert settings.max_content_length == 2000

    def test_content_limit_can_be_lowered(self):
        assert ThreadSettings(max_content_length=500).max_content_length == 500

    @pytest.mark.parametrize("limit", [0, 2001])
    def test_content_limit_out_of_range_rejected(self, limit):
        with pytest.raises(PydanticValidationError):
            ThreadSettings(max_content_length=limit)

    def test_content_limit_from_environment_is_bounded(self, monkeypatch):
        monkeypatch.setenv("THREADS__MAX_CONTENT_LENGTH", "5000")

        with pytest.raises(PydanticValidationError):
            Settings()
