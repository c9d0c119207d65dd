"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from tunebridge.core.config import Settings


class TestSettings:
    """Settings validation and derived values."""

    def test_defaults(self):
        config = Settings()
        assert config.DEFAULT_LIMIT <= config.MAX_LIMIT
        assert config.source_names == ["spotify", "youtube"]

    def test_default_limit_above_max_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(DEFAULT_LIMIT=20, MAX_LIMIT=10)

    def test_default_limit_equal_to_max(self):
        config = Settings(DEFAULT_LIMIT=10, MAX_LIMIT=10)
        assert config.DEFAULT_LIMIT == config.MAX_LIMIT

    def test_source_names_are_normalized(self):
        config = Settings(SOURCES=" Spotify, ,YouTube ")
        assert config.source_names == ["spotify", "youtube"]

    def test_tie_break_reaches_scoring_config(self):
        assert Settings(TIE_BREAK="popularity").scoring_config().tie_break == "popularity"
