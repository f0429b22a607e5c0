"""
Configuration management.
"""

import datetime
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from babel.dates import get_timezone

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Formatting configuration.

    Loads from environment variables. Locale and currency are fixed and
    not configurable here.
    """

    # IANA zone name for aware datetimes; None means the host's local zone
    display_timezone: Optional[str] = field(
        default_factory=lambda: os.getenv("DISPLAY_TIMEZONE") or None
    )

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        config = cls()
        logger.debug("Loaded formatting config: %s", config.to_dict())
        return config

    def timezone(self) -> datetime.tzinfo:
        """
        Resolve the display time zone.

        Raises:
            LookupError: If the zone name is unknown.
        """
        return get_timezone(self.display_timezone)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "display_timezone": self.display_timezone,
        }
