"""
Config Package - Application configuration and logging setup.
"""

from config.settings import Settings, get_settings
from config.logging_setup import configure_logging

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
]
