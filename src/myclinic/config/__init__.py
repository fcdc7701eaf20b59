"""Configuration management for the MyClinic contracts service.

Provides service settings from environment variables (AppSettings).
"""

from .app_settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
]
