"""Catalog Store: GraphQL API for carts and products stored as JSON files"""

__version__ = "1.0.0"
