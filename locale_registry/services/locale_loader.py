"""
Loads locale resource files into the catalog and the registry
"""

from __future__ import annotations

import logging
import os
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import List, Optional

from locale_registry.exceptions import (
    LocaleDirectoryError,
    LocaleRegistryError,
    MissingDisplayNameError,
)
from locale_registry.models import LocaleEntry, LoadReport
from locale_registry.services.bidirectional_registry import BidirectionalRegistry
from locale_registry.services.message_catalog import MessageCatalog
from locale_registry.services.metadata_reader import MetadataReader
from locale_registry.utils.filename import LOCALE_FILE_EXTENSION, FilenameParser
from locale_registry.utils.language_tag import canonicalize_tag
from locale_registry.utils.resources import PathLike

logger = logging.getLogger(__name__)


class LocaleLoader:
    """
    Validates a locale file, then loads its messages and registers it.

    Cheap local checks (filename, tag, display name) all run before the
    catalog is touched, and the registry is updated right after a successful
    catalog load. A failure at any step leaves both untouched.
    """

    def __init__(
        self,
        filename_parser: FilenameParser,
        metadata_reader: MetadataReader,
        catalog: MessageCatalog,
        registry: BidirectionalRegistry,
    ):
        self.filename_parser = filename_parser
        self.metadata_reader = metadata_reader
        self.catalog = catalog
        self.registry = registry

    def load_locale_file(self, source: Optional[Traversable], path: PathLike) -> LocaleEntry:
        """
        Load one locale file.

        Args:
            source: Resource root ``path`` is relative to, or None for disk
            path: Path of the file

        Returns:
            The registered entry

        Raises:
            IllegalFilenameError: Filename does not follow <prefix>.<tag>.toml
            InvalidTagError: Tag part is not a known language tag
            LocaleFileReadError: File cannot be read
            MetadataDecodeError: Metadata is not valid TOML or has wrong types
            MissingDisplayNameError: displayname is absent or blank
            CatalogLoadError: Message content is malformed
        """
        filename = os.path.basename(str(path))
        tag = canonicalize_tag(self.filename_parser.parse(filename))

        display_name = self.metadata_reader.read_display_name(source, path).strip()
        if not display_name:
            raise MissingDisplayNameError(str(path))

        self.catalog.load_messages(source, path, tag)
        self.registry.upsert(display_name, tag)

        logger.debug("Loaded locale %s <=> %s from %s", display_name, tag, path)
        return LocaleEntry(display_name=display_name, tag=tag)

    def load_locales_dir(self, directory: PathLike) -> LoadReport:
        """
        Load every ``*.toml`` file below ``directory``, recursively.

        Files are loaded one by one in sorted path order; a failing file is
        recorded and skipped.

        Raises:
            LocaleDirectoryError: If the directory cannot be enumerated
        """
        report = LoadReport()
        for path in self._discover(Path(directory)):
            try:
                self.load_locale_file(None, path)
            except LocaleRegistryError as exc:
                logger.warning("Skipping %s: %s", path, exc)
                report.failed.append(str(path))
            else:
                report.succeeded.append(str(path))

        logger.info(
            "Loaded %d locale files from %s (%d failed)",
            len(report.succeeded), directory, len(report.failed),
        )
        return report

    @staticmethod
    def _discover(directory: Path) -> List[Path]:
        if not directory.exists():
            raise LocaleDirectoryError(str(directory), "no such directory")
        if not directory.is_dir():
            raise LocaleDirectoryError(str(directory), "not a directory")

        found: List[Path] = []

        def _on_error(exc: OSError) -> None:
            raise LocaleDirectoryError(str(directory), exc.strerror or str(exc)) from exc

        for root, dirs, files in os.walk(directory, onerror=_on_error):
            dirs.sort()
            for name in files:
                if os.path.splitext(name)[1] == LOCALE_FILE_EXTENSION:
                    found.append(Path(root) / name)
        return sorted(found)
