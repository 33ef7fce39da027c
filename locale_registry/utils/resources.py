"""
Reading locale resources from disk or from a resource tree
"""

from __future__ import annotations

from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Optional, Union

from locale_registry.exceptions import LocaleFileReadError

PathLike = Union[str, Path]


def read_resource(source: Optional[Traversable], path: PathLike) -> bytes:
    """
    Read a locale resource.

    Args:
        source: Root to resolve ``path`` against (a package resource tree from
            ``importlib.resources.files`` or a ``pathlib.Path``); None reads
            ``path`` straight from disk
        path: File path, relative to ``source`` when one is given

    Raises:
        LocaleFileReadError: If the file cannot be read
    """
    try:
        if source is None:
            return Path(path).read_bytes()
        return source.joinpath(str(path)).read_bytes()
    except OSError as exc:
        raise LocaleFileReadError(str(path), exc.strerror or str(exc)) from exc
