"""
Utility functions for locale_registry
"""

from .filename import LOCALE_FILE_EXTENSION, FilenameParser
from .language_tag import canonicalize_tag, is_valid_tag

__all__ = [
    "LOCALE_FILE_EXTENSION",
    "FilenameParser",
    "canonicalize_tag",
    "is_valid_tag",
]
