"""
Services composing the locale registry
"""

from .bidirectional_registry import BidirectionalRegistry
from .locale_loader import LocaleLoader
from .locale_selector import ActiveLocaleSelector
from .message_catalog import Localizer, Message, MessageCatalog
from .metadata_reader import MetadataReader

__all__ = [
    "ActiveLocaleSelector",
    "BidirectionalRegistry",
    "LocaleLoader",
    "Localizer",
    "Message",
    "MessageCatalog",
    "MetadataReader",
]
