"""
Base exception for the locale registry
"""


class LocaleRegistryError(Exception):
    """Root of every error raised by locale_registry"""

    def __init__(self, message: str, code: str = "LOCALE_REGISTRY_ERROR",
                 details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
