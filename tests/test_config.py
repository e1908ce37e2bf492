"""Tests for configuration module."""

import dataclasses

import pytest

from jsondelta.config import DEFAULT_TEXT_DIFF_MIN_LENGTH, DiffConfig


class TestDiffConfig:
    """Test DiffConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = DiffConfig()

        assert config.text_diff_min_length == 10_000
        assert config.text_diff_min_length == DEFAULT_TEXT_DIFF_MIN_LENGTH
        assert config.escape_str == "$"

    def test_custom_config(self):
        """Test custom configuration values."""
        config = DiffConfig(text_diff_min_length=50, escape_str="@")

        assert config.text_diff_min_length == 50
        assert config.escape_str == "@"

    @pytest.mark.parametrize("length", [0, -1])
    def test_validation_text_diff_min_length(self, length):
        """Test validation of non-positive text_diff_min_length."""
        with pytest.raises(ValueError, match="text_diff_min_length must be positive"):
            DiffConfig(text_diff_min_length=length)

    def test_validation_escape_str(self):
        """Test validation of empty escape_str."""
        with pytest.raises(ValueError, match="escape_str cannot be empty"):
            DiffConfig(escape_str="")

    def test_config_is_frozen(self):
        """Test configuration cannot be changed after creation."""
        config = DiffConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.text_diff_min_length = 1

    def test_to_provenance_dict(self):
        """Test provenance dictionary contents."""
        config = DiffConfig(text_diff_min_length=20)

        assert config.to_provenance_dict() == {
            "syntax": "symmetric",
            "text_diff": {"min_length": 20},
            "escape_str": "$",
        }
