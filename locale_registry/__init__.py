"""
locale_registry

Discovers ``<prefix>.<tag>.toml`` translation files, keeps a one-to-one
mapping between each locale's display name and its canonical language tag,
and translates message ids through the selected locale.
"""

from .exceptions import (
    CatalogLoadError,
    IllegalFilenameError,
    InvalidTagError,
    LocaleDirectoryError,
    LocaleFileReadError,
    LocaleNotLoadedError,
    LocaleNotSetError,
    LocaleRegistryError,
    MessageNotFoundError,
    MetadataDecodeError,
    MissingDisplayNameError,
)
from .locales import Locales
from .models import LanguageTag, LoadReport, LocaleEntry
from .utils.language_tag import canonicalize_tag

__version__ = "0.1.0"

__all__ = [
    "Locales",
    "LanguageTag",
    "LocaleEntry",
    "LoadReport",
    "canonicalize_tag",
    "LocaleRegistryError",
    "IllegalFilenameError",
    "InvalidTagError",
    "MissingDisplayNameError",
    "LocaleNotLoadedError",
    "LocaleNotSetError",
    "LocaleFileReadError",
    "MetadataDecodeError",
    "CatalogLoadError",
    "MessageNotFoundError",
    "LocaleDirectoryError",
]
