"""
Book catalog REST API.

The service keeps two in-memory stores (user credentials and books),
issues a signed session token in a ``jwt`` cookie on login and exposes
CRUD endpoints over the book collection. Use :func:`bookserver.main.create_app`
to build the ASGI application, or ``bookserver start`` from the shell.
"""

__version__ = "1.0.0"
