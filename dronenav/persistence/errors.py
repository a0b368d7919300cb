"""Catalog loading exceptions."""


class CatalogError(Exception):
    """Base exception for all reference-catalog errors."""


class CatalogFileError(CatalogError):
    """Raised when a catalog file is missing or is not a JSON array."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
