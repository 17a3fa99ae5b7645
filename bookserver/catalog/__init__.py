"""
Catalog package for the book server.

This package holds the book schemas, the in-memory ``BookStore`` and the
CRUD routes over it. ``router`` carries the read-only endpoint and
``write_router`` the mutating ones.
"""

from .router import router as catalog_router  # noqa: F401
from .router import write_router as catalog_write_router  # noqa: F401
