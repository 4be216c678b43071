"""Configuration for axtract.

Usage:
    from axtract.config import get_settings

    settings = get_settings()
    print(settings.max_depth)
"""

from .settings import AxtractSettings, get_settings, reset_settings

__all__ = ["AxtractSettings", "get_settings", "reset_settings"]
