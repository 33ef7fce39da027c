"""
Message catalog: message id -> localized text, per language tag

Resource layout (TOML)::

    displayname = "English(US)"        # metadata, not a message
    ID_HELLO = "hello, world!"         # plain message

    [ID_APPLES]                        # message with plural forms
    description = "apple counter"
    one = "one apple"
    other = "many apples"

    [menu]                             # nested ids: menu.open, menu.close
    open = "Open"
    close = "Close"

Only the ``other`` form is rendered; plural selection and template data are
not supported.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from importlib.resources.abc import Traversable
from typing import Any, Dict, List, Optional, Sequence

from locale_registry.exceptions import CatalogLoadError, MessageNotFoundError
from locale_registry.models import LanguageTag
from locale_registry.utils.resources import PathLike, read_resource

logger = logging.getLogger(__name__)

METADATA_KEYS = frozenset({"displayname"})
PLURAL_FORMS = ("zero", "one", "two", "few", "many", "other")
MESSAGE_KEYS = frozenset({"id", "description", "hash", "leftdelim", "rightdelim", *PLURAL_FORMS})


@dataclass(frozen=True)
class Message:
    """A single translatable message"""

    id: str
    other: str
    description: Optional[str] = None
    forms: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)


class Localizer:
    """Resolves message ids against an ordered list of language tags"""

    def __init__(self, catalog: "MessageCatalog", tags: Sequence[LanguageTag]):
        self._catalog = catalog
        self.tags = list(dict.fromkeys(tags))

    @property
    def tag(self) -> LanguageTag:
        return self.tags[0]

    def localize(self, message_id: str, default: Optional[str] = None) -> str:
        """
        Translate ``message_id``.

        Raises:
            MessageNotFoundError: If no tag has the message and no default is given
        """
        for tag in self.tags:
            message = self._catalog.get_message(tag, message_id)
            if message is not None:
                return message.other
        if default is not None:
            return default
        raise MessageNotFoundError(message_id, str(self.tag))


class MessageCatalog:
    """Stores messages loaded from locale resource files"""

    def __init__(self, default_tag: LanguageTag):
        self.default_tag = default_tag
        self._messages: Dict[LanguageTag, Dict[str, Message]] = {}

    def load_messages(self, source: Optional[Traversable], path: PathLike, tag: LanguageTag) -> int:
        """
        Load every message of a resource file under ``tag``.

        A file is applied entirely or not at all. Ids already present for
        ``tag`` are overwritten, others are kept.

        Returns:
            Number of messages loaded

        Raises:
            LocaleFileReadError: If the file cannot be read
            CatalogLoadError: If the file is not TOML or a message is malformed
        """
        raw = read_resource(source, path)
        try:
            document = tomllib.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            raise CatalogLoadError(str(path), str(exc)) from exc

        parsed: Dict[str, Message] = {}
        for key, value in document.items():
            if key in METADATA_KEYS:
                continue
            self._collect(str(path), key, value, parsed)

        self._messages.setdefault(tag, {}).update(parsed)
        logger.debug("Loaded %d messages for %s from %s", len(parsed), tag, path)
        return len(parsed)

    def _collect(self, path: str, message_id: str, value: Any, out: Dict[str, Message]) -> None:
        if isinstance(value, str):
            out[message_id] = Message(id=message_id, other=value)
            return
        if not isinstance(value, dict):
            raise CatalogLoadError(
                path, f"unsupported value of type {type(value).__name__}", message_id=message_id
            )
        if value and set(value) <= MESSAGE_KEYS:
            out[message_id] = self._build_message(path, message_id, value)
            return
        for child_key, child_value in value.items():
            self._collect(path, f"{message_id}.{child_key}", child_value, out)

    @staticmethod
    def _build_message(path: str, message_id: str, table: Dict[str, Any]) -> Message:
        for key, value in table.items():
            if not isinstance(value, str):
                raise CatalogLoadError(path, f"field '{key}' must be a string", message_id=message_id)
        if table.get("id", message_id) != message_id:
            raise CatalogLoadError(path, f"id '{table['id']}' does not match key", message_id=message_id)
        if "other" not in table:
            raise CatalogLoadError(path, "message has no 'other' form", message_id=message_id)
        forms = {form: table[form] for form in PLURAL_FORMS if form in table}
        return Message(
            id=message_id,
            other=table["other"],
            description=table.get("description"),
            forms=forms,
        )

    def get_message(self, tag: LanguageTag, message_id: str) -> Optional[Message]:
        return self._messages.get(tag, {}).get(message_id)

    def lookup(self, tag: LanguageTag, message_id: str) -> str:
        """
        Translate ``message_id`` for exactly ``tag``.

        Raises:
            MessageNotFoundError: If the tag has no such message
        """
        message = self.get_message(tag, message_id)
        if message is None:
            raise MessageNotFoundError(message_id, str(tag))
        return message.other

    def localizer(self, tag: LanguageTag) -> Localizer:
        """Localizer for ``tag`` falling back to the default tag"""
        return Localizer(self, [tag, self.default_tag])

    def has_tag(self, tag: LanguageTag) -> bool:
        return tag in self._messages

    def message_ids(self, tag: LanguageTag) -> List[str]:
        return sorted(self._messages.get(tag, {}))
