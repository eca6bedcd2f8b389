"""Conversion of catalog errors into GraphQL error values"""

import logging

from graphql import GraphQLError

from ..core.errors import CatalogError, StorageError

logger = logging.getLogger(__name__)


def to_graphql_error(error: CatalogError) -> GraphQLError:
    """
    Build the error value a resolver returns in place of its result.

    Returning (not raising) the error leaves the field ``null`` and adds an
    ``errors`` entry with ``extensions.code``. Storage faults are logged and
    reported with a generic message.
    """
    if isinstance(error, StorageError):
        logger.error(f"Storage failure: {error.message}", exc_info=error)
        return GraphQLError(
            "Internal storage error",
            extensions={"code": error.code},
        )
    return GraphQLError(error.message, extensions={"code": error.code})
