"""
One-to-one registry between locale display names and language tags
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from locale_registry.exceptions import LocaleNotLoadedError
from locale_registry.models import LanguageTag, LocaleEntry

logger = logging.getLogger(__name__)


class BidirectionalRegistry:
    """
    Display name <-> LanguageTag bijection.

    Both directions live in paired dicts that are only written by ``upsert``
    and ``clear``, so every name has exactly one tag and every tag exactly one
    name. Not thread-safe: concurrent callers must hold one lock around every
    call.
    """

    def __init__(self):
        self._tag_by_name: Dict[str, LanguageTag] = {}
        self._name_by_tag: Dict[LanguageTag, str] = {}

    def upsert(self, display_name: str, tag: LanguageTag) -> Tuple[LocaleEntry, ...]:
        """
        Associate ``display_name`` with ``tag``, evicting conflicting entries.

        Eviction order:
        1. the entry currently holding ``tag`` (its display name is replaced)
        2. the entry currently holding ``display_name`` under another tag

        Args:
            display_name: Non-empty, already trimmed display name
            tag: Canonical tag

        Returns:
            Entries removed to keep the mapping one-to-one (re-inserting an
            identical pair displaces nothing)
        """
        if not display_name:
            raise ValueError("display_name must not be empty")

        evicted: List[LocaleEntry] = []

        old_name = self._name_by_tag.get(tag)
        if old_name is not None:
            evicted.append(self._remove(old_name, tag))

        old_tag = self._tag_by_name.get(display_name)
        if old_tag is not None:
            evicted.append(self._remove(display_name, old_tag))

        self._tag_by_name[display_name] = tag
        self._name_by_tag[tag] = display_name

        current = LocaleEntry(display_name=display_name, tag=tag)
        displaced = tuple(entry for entry in evicted if entry != current)
        for entry in displaced:
            logger.info(
                "Locale %s (%s) replaced by %s (%s)",
                entry.display_name, entry.tag, display_name, tag,
            )
        return displaced

    def _remove(self, display_name: str, tag: LanguageTag) -> LocaleEntry:
        del self._tag_by_name[display_name]
        del self._name_by_tag[tag]
        return LocaleEntry(display_name=display_name, tag=tag)

    def clear(self) -> None:
        self._tag_by_name.clear()
        self._name_by_tag.clear()

    def tag_of(self, display_name: str) -> LanguageTag:
        try:
            return self._tag_by_name[display_name]
        except KeyError:
            raise LocaleNotLoadedError(display_name) from None

    def name_of(self, tag: LanguageTag) -> str:
        try:
            return self._name_by_tag[tag]
        except KeyError:
            raise LocaleNotLoadedError(str(tag)) from None

    def entries(self) -> List[LocaleEntry]:
        """All entries ordered by display name"""
        return [
            LocaleEntry(display_name=name, tag=self._tag_by_name[name])
            for name in sorted(self._tag_by_name)
        ]

    def tags(self) -> List[LanguageTag]:
        """Tags in the same order as ``display_names()``"""
        return [entry.tag for entry in self.entries()]

    def display_names(self) -> List[str]:
        return sorted(self._tag_by_name)

    def __contains__(self, tag: object) -> bool:
        return tag in self._name_by_tag

    def __len__(self) -> int:
        return len(self._name_by_tag)

    def __iter__(self) -> Iterator[LocaleEntry]:
        return iter(self.entries())
