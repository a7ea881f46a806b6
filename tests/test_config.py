"""Tests for cache item settings."""

import tempfile
import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from standard_cache import CacheItemSettings, load_settings


class TestCacheItemSettings:
    """Tests for CacheItemSettings."""

    def test_default_values(self):
        """Test default settings values."""
        settings = CacheItemSettings()
        assert settings.default_ttl is None

    def test_get_default(self):
        """get_default returns the defaults."""
        assert CacheItemSettings.get_default() == CacheItemSettings()

    def test_custom_values(self):
        """Test custom settings values."""
        settings = CacheItemSettings(default_ttl=300)
        assert settings.default_ttl == 300

    def test_negative_ttl_rejected(self):
        """A negative default TTL fails validation."""
        with pytest.raises(ValidationError):
            CacheItemSettings(default_ttl=-1)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self):
        """A missing file gives the defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            settings = load_settings(Path(tmpdir) / "missing.toml")
            assert settings == CacheItemSettings.get_default()

    def test_reads_cache_table(self):
        """Values are read from the [cache] table."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cache.toml"
            path.write_text("[cache]\ndefault_ttl = 30\n", encoding="utf-8")
            settings = load_settings(path)
            assert settings.default_ttl == 30

    def test_file_without_cache_table(self):
        """A file without a [cache] table gives the defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cache.toml"
            path.write_text('[other]\nname = "x"\n', encoding="utf-8")
            assert load_settings(path).default_ttl is None

    def test_invalid_value(self):
        """A wrongly typed value fails validation."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cache.toml"
            path.write_text('[cache]\ndefault_ttl = "forever"\n', encoding="utf-8")
            with pytest.raises(ValidationError):
                load_settings(path)

    def test_malformed_toml(self):
        """Malformed TOML raises TOMLDecodeError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cache.toml"
            path.write_text("[cache\n", encoding="utf-8")
            with pytest.raises(tomllib.TOMLDecodeError):
                load_settings(path)
