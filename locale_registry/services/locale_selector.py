"""
Active locale selection and translation
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from locale_registry.exceptions import InvalidTagError, LocaleNotLoadedError, LocaleNotSetError
from locale_registry.models import LanguageTag
from locale_registry.services.bidirectional_registry import BidirectionalRegistry
from locale_registry.services.message_catalog import Localizer, MessageCatalog
from locale_registry.utils.language_tag import canonicalize_tag

logger = logging.getLogger(__name__)


class ActiveLocaleSelector:
    """Tracks the selected locale and translates message ids through it"""

    def __init__(self, registry: BidirectionalRegistry, catalog: MessageCatalog):
        self.registry = registry
        self.catalog = catalog
        self._active_tag: Optional[LanguageTag] = None
        self._localizer: Optional[Localizer] = None

    @property
    def active_tag(self) -> Optional[LanguageTag]:
        return self._active_tag

    @property
    def active_display_name(self) -> Optional[str]:
        if self._active_tag is None or self._active_tag not in self.registry:
            return None
        return self.registry.name_of(self._active_tag)

    def select_by_name(self, display_name: str) -> LanguageTag:
        """
        Activate the locale registered under ``display_name``.

        Raises:
            LocaleNotLoadedError: If no locale has that display name
        """
        tag = self.registry.tag_of(display_name)
        self._activate(tag)
        return tag

    def select_by_tag(self, tag: Union[str, LanguageTag]) -> str:
        """
        Activate the locale registered under ``tag`` and return its display name.

        ``tag`` may use any equivalent spelling (en_US, en-US).

        Raises:
            LocaleNotLoadedError: If no locale has that tag
        """
        try:
            canonical = canonicalize_tag(tag)
        except InvalidTagError:
            raise LocaleNotLoadedError(str(tag)) from None
        display_name = self.registry.name_of(canonical)
        self._activate(canonical)
        return display_name

    def _activate(self, tag: LanguageTag) -> None:
        self._localizer = self.catalog.localizer(tag)
        self._active_tag = tag
        logger.debug("Active locale set to %s", tag)

    def localize(self, message_id: str, default: Optional[str] = None) -> str:
        """
        Translate ``message_id`` with the active locale.

        Args:
            message_id: Message id
            default: Returned when the message is missing; None makes a
                missing message an error

        Raises:
            LocaleNotSetError: If no locale has been selected
            MessageNotFoundError: If the message is missing and default is None
        """
        if self._localizer is None:
            raise LocaleNotSetError()
        return self._localizer.localize(message_id, default)

    def tr(self, message_id: str) -> str:
        """Strict lookup"""
        return self.localize(message_id)

    def translate(self, message_id: str, fallback: str) -> str:
        """Lookup returning ``fallback`` for missing messages"""
        return self.localize(message_id, fallback)
