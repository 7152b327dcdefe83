"""Configuration module for PageTree.

Usage:
    from pagetree.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.path_separator)
"""

from pagetree.config.logging import configure_logging, get_logger
from pagetree.config.settings import DEFAULT_PATH_SEPARATOR, Settings, get_settings

__all__ = [
    "DEFAULT_PATH_SEPARATOR",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
