"""
Locale loading, lookup and translation errors
"""

from .base import LocaleRegistryError


class IllegalFilenameError(LocaleRegistryError):
    """Filename does not follow <prefix>.<tag>.toml"""

    def __init__(self, filename: str):
        super().__init__(
            message=f"illegal locale filename: {filename}",
            code="ILLEGAL_FILENAME",
            details={"filename": filename}
        )


class InvalidTagError(LocaleRegistryError):
    """Raw text is not a language tag known to CLDR"""

    def __init__(self, tag: str, reason: str = ""):
        message = f"illegal language tag: {tag}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            code="INVALID_LANGUAGE_TAG",
            details={"tag": tag, "reason": reason}
        )


class MissingDisplayNameError(LocaleRegistryError):
    """Resource metadata has no usable display name"""

    def __init__(self, path: str):
        super().__init__(
            message=f"missing display name: {path}",
            code="MISSING_DISPLAY_NAME",
            details={"path": path}
        )


class LocaleNotLoadedError(LocaleRegistryError):
    """No registered locale matches the given display name or tag"""

    def __init__(self, name: str):
        super().__init__(
            message=f"locale not loaded: {name}",
            code="LOCALE_NOT_LOADED",
            details={"name": name}
        )


class LocaleNotSetError(LocaleRegistryError):
    """Translation requested before any locale was selected"""

    def __init__(self):
        super().__init__(
            message="no locale has been selected",
            code="LOCALE_NOT_SET"
        )


class LocaleFileReadError(LocaleRegistryError):
    """Resource file could not be read"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"cannot read locale file {path}: {reason}",
            code="LOCALE_FILE_READ_ERROR",
            details={"path": path, "reason": reason}
        )


class MetadataDecodeError(LocaleRegistryError):
    """Resource metadata is not valid TOML or has fields of the wrong type"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"cannot decode locale metadata in {path}: {reason}",
            code="METADATA_DECODE_ERROR",
            details={"path": path, "reason": reason}
        )


class CatalogLoadError(LocaleRegistryError):
    """Message content of a resource file is malformed"""

    def __init__(self, path: str, reason: str, message_id: str = None):
        details = {"path": path, "reason": reason}
        if message_id is not None:
            details["message_id"] = message_id
        super().__init__(
            message=f"cannot load messages from {path}: {reason}",
            code="CATALOG_LOAD_ERROR",
            details=details
        )


class MessageNotFoundError(LocaleRegistryError):
    """Message id is missing from the catalog of the requested tag"""

    def __init__(self, message_id: str, tag: str):
        super().__init__(
            message=f"message \"{message_id}\" not found in language \"{tag}\"",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id, "tag": tag}
        )


class LocaleDirectoryError(LocaleRegistryError):
    """Locale directory cannot be enumerated"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"cannot scan locale directory {path}: {reason}",
            code="LOCALE_DIRECTORY_ERROR",
            details={"path": path, "reason": reason}
        )
