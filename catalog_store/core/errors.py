"""Catalog Store errors

Repositories raise these; the GraphQL layer turns them into error values
carrying ``extensions.code``.
"""


class CatalogError(Exception):
    """Base exception for catalog errors"""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(CatalogError):
    """Required text missing or a value out of range"""

    code = "BAD_USER_INPUT"


class RecordNotFoundError(CatalogError):
    """Referenced cart or product file does not exist"""

    code = "NOT_FOUND"


class IdentifierConflictError(CatalogError):
    """Every generated identifier collided with an existing record"""

    code = "CONFLICT"


class StorageError(CatalogError):
    """A record could not be parsed or written"""

    pass
