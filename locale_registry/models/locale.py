"""
Locale value objects

LanguageTag and LocaleEntry are immutable so they can be used as dict keys
and shared between the registry, the catalog and callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


@dataclass(frozen=True)
class LanguageTag:
    """
    Canonical language identifier

    Build instances with ``utils.language_tag.canonicalize_tag``; the
    constructor does not validate.
    """

    language: str
    script: Optional[str] = None
    territory: Optional[str] = None
    variant: Optional[str] = None

    @property
    def parts(self) -> List[str]:
        return [p for p in (self.language, self.script, self.territory, self.variant) if p]

    def to_posix(self) -> str:
        """Underscore form used by Babel and gettext (``zh_CN``)"""
        return "_".join(self.parts)

    def __str__(self) -> str:
        return "-".join(self.parts)


@dataclass(frozen=True)
class LocaleEntry:
    """One display name <-> tag pair held by the registry"""

    display_name: str
    tag: LanguageTag

    @property
    def tag_name(self) -> str:
        return str(self.tag)


@dataclass
class LoadReport:
    """Outcome of loading every locale file under a directory"""

    succeeded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed


class LocaleFileMeta(BaseModel):
    """Metadata section of a locale resource file"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    display_name: StrictStr = Field(
        default="",
        alias="displayname",
        description="Human-readable name of the locale, e.g. 'English(US)'"
    )
