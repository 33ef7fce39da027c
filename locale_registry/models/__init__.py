"""
Model definitions for locale_registry
"""

from .locale import LanguageTag, LoadReport, LocaleEntry, LocaleFileMeta

__all__ = [
    "LanguageTag",
    "LocaleEntry",
    "LoadReport",
    "LocaleFileMeta",
]
