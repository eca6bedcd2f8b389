# Core modules

from .config import Settings, get_settings
from .errors import (
    CatalogError,
    InvalidInputError,
    RecordNotFoundError,
    IdentifierConflictError,
    StorageError,
)

__all__ = [
    "Settings",
    "get_settings",
    "CatalogError",
    "InvalidInputError",
    "RecordNotFoundError",
    "IdentifierConflictError",
    "StorageError",
]
