"""
Language tag canonicalization backed by Babel's CLDR data
"""

from __future__ import annotations

import functools
import re
from typing import FrozenSet, NamedTuple, Union

from babel import Locale
from babel.core import get_global, parse_locale

from locale_registry.exceptions import InvalidTagError
from locale_registry.models import LanguageTag

_TAG_CHARS = re.compile(r"[A-Za-z0-9_-]+")
_SEPARATORS = re.compile(r"[-_]")
_EXTLANG = re.compile(r"[A-Za-z]{3}")


class KnownSubtags(NamedTuple):
    languages: FrozenSet[str]
    scripts: FrozenSet[str]
    territories: FrozenSet[str]
    variants: FrozenSet[str]


@functools.lru_cache(maxsize=1)
def known_subtags() -> KnownSubtags:
    """Subtags CLDR has English display names for"""
    english = Locale("en")
    return KnownSubtags(
        languages=frozenset(english.languages),
        scripts=frozenset(english.scripts),
        territories=frozenset(english.territories),
        variants=frozenset(code.upper() for code in english.variants),
    )


def canonicalize_tag(raw: Union[str, LanguageTag]) -> LanguageTag:
    """
    Parse a raw language identifier into its canonical LanguageTag.

    Supports:
    - hyphen or underscore separators (zh-CN, zh_CN)
    - any letter case (EN-us -> en-US)
    - script subtags and numeric regions (zh-Hant-TW, es-419)
    - any combination of known subtags (de-US, zh-Hant-US)
    - extended language subtags (zh-yue -> yue)
    - deprecated language codes (iw -> he, in -> id)

    Each subtag must be known to CLDR on its own; the combination does not
    need locale data. Well-formed but unknown codes such as "foo" or "xx-YY"
    are rejected.

    Args:
        raw: Language identifier, or an already canonical LanguageTag

    Returns:
        Canonical LanguageTag

    Raises:
        InvalidTagError: If the identifier is malformed or has an unknown subtag
    """
    if isinstance(raw, LanguageTag):
        return raw
    if not isinstance(raw, str):
        raise InvalidTagError(repr(raw), "expected a string")
    return _canonicalize(raw.strip())


@functools.lru_cache(maxsize=256)
def _canonicalize(text: str) -> LanguageTag:
    if not text:
        raise InvalidTagError(text, "empty tag")
    if not _TAG_CHARS.fullmatch(text):
        raise InvalidTagError(text, "unexpected characters")

    known = known_subtags()
    subtags = _SEPARATORS.split(text)

    # zh-yue: the extended language subtag replaces its prefix
    if len(subtags) > 1 and _EXTLANG.fullmatch(subtags[1]) and subtags[1].lower() in known.languages:
        subtags = subtags[1:]

    try:
        language, territory, script, variant = parse_locale("_".join(subtags))[:4]
    except ValueError as exc:
        raise InvalidTagError(text, str(exc)) from exc

    alias = get_global("language_aliases").get(language)
    if alias and alias.isalpha():
        language = alias

    if language not in known.languages:
        raise InvalidTagError(text, f"unknown language {language}")
    if script is not None and script not in known.scripts:
        raise InvalidTagError(text, f"unknown script {script}")
    if territory is not None and territory not in known.territories:
        raise InvalidTagError(text, f"unknown region {territory}")
    if variant is not None and variant not in known.variants:
        raise InvalidTagError(text, f"unknown variant {variant}")

    return LanguageTag(language=language, script=script, territory=territory, variant=variant)


def is_valid_tag(raw: str) -> bool:
    try:
        canonicalize_tag(raw)
    except InvalidTagError:
        return False
    return True
