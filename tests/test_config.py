"""
Tests for formatting configuration.
"""

import pytest
from datetime import datetime, timezone
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from intl_format import Config


class TestConfig:
    """Tests for loading configuration from the environment."""

    def test_defaults_to_local_zone(self, monkeypatch):
        monkeypatch.delenv("DISPLAY_TIMEZONE", raising=False)

        config = Config.load()

        assert config.display_timezone is None
        assert config.timezone() is not None

    def test_empty_value_means_local_zone(self, monkeypatch):
        monkeypatch.setenv("DISPLAY_TIMEZONE", "")

        assert Config.load().display_timezone is None

    def test_reads_display_timezone(self, monkeypatch):
        monkeypatch.setenv("DISPLAY_TIMEZONE", "Europe/London")

        config = Config.load()

        assert config.display_timezone == "Europe/London"
        assert config.to_dict() == {"display_timezone": "Europe/London"}

    def test_resolves_timezone(self):
        tz = Config(display_timezone="Asia/Tokyo").timezone()
        moment = datetime(2024, 1, 1, 20, 0, tzinfo=timezone.utc)

        assert moment.astimezone(tz).day == 2

    def test_unknown_timezone_raises(self):
        with pytest.raises(LookupError):
            Config(display_timezone="Not/AZone").timezone()
