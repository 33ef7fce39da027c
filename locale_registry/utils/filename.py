"""
Locale resource filename parsing

Filenames follow ``<prefix>.<tag>.toml``:

    active.zh_CN.toml  -> "zh_CN"
    active.en-US.toml  -> "en-US"
"""

from __future__ import annotations

import re

from locale_registry.exceptions import IllegalFilenameError

LOCALE_FILE_EXTENSION = ".toml"
LOCALE_FILENAME_PATTERN = r"{prefix}\.([\w-]+)\.toml"


class FilenameParser:
    """Extracts the raw tag part from locale filenames with a fixed prefix"""

    def __init__(self, prefix: str):
        if not prefix or not prefix.strip():
            raise ValueError("filename prefix must not be empty")
        self.prefix = prefix
        self._regex = re.compile(
            LOCALE_FILENAME_PATTERN.format(prefix=re.escape(prefix)),
            re.ASCII,
        )

    def parse(self, filename: str) -> str:
        """
        Return the tag part of ``filename`` without validating it.

        Raises:
            IllegalFilenameError: If the name does not match the pattern or
                the tag part is blank
        """
        match = self._regex.fullmatch(filename)
        if match is None:
            raise IllegalFilenameError(filename)
        tag_part = match.group(1).strip()
        if not tag_part:
            raise IllegalFilenameError(filename)
        return tag_part
