"""
Error taxonomy for the book server.

Every error raised by the stores or the token layer derives from
``BookServerError`` and carries the HTTP status it maps to. The app
factory registers a single handler that turns these into short
plain-text responses, so route functions never build error responses
themselves.
"""

from __future__ import annotations


class BookServerError(Exception):
    """Base class for request-level failures."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidInput(BookServerError):
    status_code = 400
    default_message = "Invalid input"


class NotFound(BookServerError):
    status_code = 404
    default_message = "Not found"


class Unauthorized(BookServerError):
    # Wrong passwords answer 404, same as unknown users.
    status_code = 404
    default_message = "Wrong password"


class AlreadyExists(BookServerError):
    status_code = 409
    default_message = "Already exists"


class SigningFailed(BookServerError):
    status_code = 500
    default_message = "Cannot sign token"


class TokenError(BookServerError):
    """A presented session token was rejected."""

    status_code = 401
    default_message = "Invalid session token"


class TokenMalformed(TokenError):
    default_message = "Malformed session token"


class TokenSignatureInvalid(TokenError):
    default_message = "Invalid token signature"


class TokenExpired(TokenError):
    default_message = "Session token expired"


class ConfigError(Exception):
    """Raised at startup when the configuration is missing or invalid."""
