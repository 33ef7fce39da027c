"""
Configuration access point

    from locale_registry.config import get_settings

    prefix = get_settings().filename_prefix
"""

from .settings import LocaleSettings, get_settings, reload_settings

__all__ = ["LocaleSettings", "get_settings", "reload_settings"]
