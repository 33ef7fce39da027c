"""
Locales: the caller-facing locale session

Usage::

    from locale_registry import Locales

    locales = Locales("active", "en")
    report = locales.load_locales_dir("locales")
    locales.set_locale_by_name("English(US)")
    print(locales.tr("ID_TEST"))
"""

from __future__ import annotations

from importlib.resources.abc import Traversable
from typing import List, Optional, Union

from locale_registry.config import LocaleSettings, get_settings
from locale_registry.exceptions import InvalidTagError, LocaleNotLoadedError
from locale_registry.models import LanguageTag, LocaleEntry, LoadReport
from locale_registry.services import (
    ActiveLocaleSelector,
    BidirectionalRegistry,
    LocaleLoader,
    MessageCatalog,
    MetadataReader,
)
from locale_registry.utils.filename import FilenameParser
from locale_registry.utils.language_tag import canonicalize_tag
from locale_registry.utils.resources import PathLike


class Locales:
    """
    Owns every piece of locale state: the registry, the message catalog and
    the active locale. Create one per application (or per test) and pass it
    around; there is no module-level instance.
    """

    def __init__(self, filename_prefix: str, default_language: Union[str, LanguageTag]):
        """
        Args:
            filename_prefix: Literal prefix of locale files (<prefix>.<tag>.toml)
            default_language: Tag consulted when a message is missing from the
                active locale

        Raises:
            InvalidTagError: If default_language is not a known language tag
            ValueError: If filename_prefix is empty
        """
        self.default_tag = canonicalize_tag(default_language)
        self.filename_prefix = filename_prefix

        self.registry = BidirectionalRegistry()
        self.catalog = MessageCatalog(self.default_tag)
        self.loader = LocaleLoader(
            filename_parser=FilenameParser(filename_prefix),
            metadata_reader=MetadataReader(),
            catalog=self.catalog,
            registry=self.registry,
        )
        self.selector = ActiveLocaleSelector(self.registry, self.catalog)

    @classmethod
    def from_settings(cls, settings: Optional[LocaleSettings] = None) -> "Locales":
        """
        Build a session from LocaleSettings, loading ``locales_dir`` and
        selecting ``initial_locale`` when they are configured.
        """
        settings = settings or get_settings()
        locales = cls(settings.filename_prefix, settings.default_language)
        if settings.locales_dir is not None:
            locales.load_locales_dir(settings.locales_dir)
        if settings.initial_locale:
            locales.set_locale(settings.initial_locale)
        return locales

    # Loading

    def load_locale_file(self, source: Optional[Traversable], path: PathLike) -> LocaleEntry:
        """Load one locale file; see LocaleLoader.load_locale_file"""
        return self.loader.load_locale_file(source, path)

    def load_locales_dir(self, directory: PathLike) -> LoadReport:
        """Load every locale file below ``directory``; see LocaleLoader.load_locales_dir"""
        return self.loader.load_locales_dir(directory)

    # Selection

    def set_locale_by_name(self, display_name: str) -> str:
        """Activate a locale by display name and return its tag"""
        return str(self.selector.select_by_name(display_name))

    def set_locale_by_tag(self, tag_name: Union[str, LanguageTag]) -> str:
        """Activate a locale by tag and return its display name"""
        return self.selector.select_by_tag(tag_name)

    def set_locale(self, name_or_tag: str) -> LocaleEntry:
        """
        Activate a locale by display name, or by tag when no display name matches.

        Raises:
            LocaleNotLoadedError: If neither lookup matches
        """
        try:
            tag = self.selector.select_by_name(name_or_tag)
            return LocaleEntry(display_name=name_or_tag, tag=tag)
        except LocaleNotLoadedError:
            display_name = self.selector.select_by_tag(name_or_tag)
            return LocaleEntry(display_name=display_name, tag=self.selector.active_tag)

    @property
    def current_tag(self) -> Optional[str]:
        tag = self.selector.active_tag
        return str(tag) if tag is not None else None

    @property
    def current_display_name(self) -> Optional[str]:
        return self.selector.active_display_name

    # Queries

    def tag_name_of(self, display_name: str) -> str:
        return str(self.registry.tag_of(display_name))

    def display_name_of(self, tag_name: Union[str, LanguageTag]) -> str:
        try:
            tag = canonicalize_tag(tag_name)
        except InvalidTagError:
            raise LocaleNotLoadedError(str(tag_name)) from None
        return self.registry.name_of(tag)

    def get_locales(self) -> List[str]:
        """Loaded tags, paired index by index with get_locale_names()"""
        return [str(tag) for tag in self.registry.tags()]

    def get_locale_names(self) -> List[str]:
        return self.registry.display_names()

    def entries(self) -> List[LocaleEntry]:
        return self.registry.entries()

    # Translation

    def localize(self, message_id: str, default: Optional[str] = None) -> str:
        return self.selector.localize(message_id, default)

    def tr(self, message_id: str) -> str:
        """
        Translate strictly.

        Raises:
            LocaleNotSetError: If no locale has been selected
            MessageNotFoundError: If the message is missing
        """
        return self.selector.tr(message_id)

    def translate(self, message_id: str, fallback: str) -> str:
        """
        Translate, returning ``fallback`` when the message is missing.

        Raises:
            LocaleNotSetError: If no locale has been selected
        """
        return self.selector.translate(message_id, fallback)

    def __repr__(self) -> str:
        return (
            f"Locales(prefix={self.filename_prefix!r}, default={str(self.default_tag)!r}, "
            f"loaded={self.get_locales()!r}, current={self.current_tag!r})"
        )
