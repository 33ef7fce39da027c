"""
Reads the metadata section of locale resource files
"""

from __future__ import annotations

import tomllib
from importlib.resources.abc import Traversable
from typing import Optional

from pydantic import ValidationError

from locale_registry.exceptions import MetadataDecodeError
from locale_registry.models import LocaleFileMeta
from locale_registry.utils.resources import PathLike, read_resource


class MetadataReader:
    """Decodes TOML locale files into LocaleFileMeta"""

    def read_meta(self, source: Optional[Traversable], path: PathLike) -> LocaleFileMeta:
        """
        Decode the metadata of a locale file.

        Raises:
            LocaleFileReadError: If the file cannot be read
            MetadataDecodeError: If the file is not TOML or a metadata field
                has the wrong type
        """
        raw = read_resource(source, path)
        try:
            document = tomllib.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise MetadataDecodeError(str(path), f"not UTF-8: {exc.reason}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise MetadataDecodeError(str(path), str(exc)) from exc

        try:
            return LocaleFileMeta.model_validate(document)
        except ValidationError as exc:
            reasons = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise MetadataDecodeError(str(path), reasons) from exc

    def read_display_name(self, source: Optional[Traversable], path: PathLike) -> str:
        """Return the untrimmed ``displayname`` field ("" when absent)"""
        return self.read_meta(source, path).display_name
