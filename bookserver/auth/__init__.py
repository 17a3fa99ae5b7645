"""
Auth package: credential store, session tokens and the login routes.
"""

from .router import router as auth_router  # noqa: F401
