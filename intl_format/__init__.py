"""
Locale-aware currency and date formatting.
"""

from .formatting import format_currency, format_date
from .config import Config

__all__ = ["format_currency", "format_date", "Config"]
