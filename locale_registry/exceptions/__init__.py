"""
Exception hierarchy for locale_registry

Every error carries a machine-readable ``code`` and a ``details`` dict.
"""

from .base import LocaleRegistryError
from .locale import (
    IllegalFilenameError,
    InvalidTagError,
    MissingDisplayNameError,
    LocaleNotLoadedError,
    LocaleNotSetError,
    LocaleFileReadError,
    MetadataDecodeError,
    CatalogLoadError,
    MessageNotFoundError,
    LocaleDirectoryError,
)

__all__ = [
    # Base
    "LocaleRegistryError",

    # Loading
    "IllegalFilenameError",
    "InvalidTagError",
    "MissingDisplayNameError",
    "LocaleFileReadError",
    "MetadataDecodeError",
    "CatalogLoadError",
    "LocaleDirectoryError",

    # Lookup
    "LocaleNotLoadedError",
    "LocaleNotSetError",
    "MessageNotFoundError",
]
