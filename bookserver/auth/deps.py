"""
FastAPI dependencies for the auth package.

Stores and token objects live on ``app.state`` (set up by
``create_app``); these helpers hand them to route functions.
``require_session`` is the session guard: attach it with
``Depends(require_session)`` to any route that needs a logged-in caller.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Header, Request

from ..config import Settings
from ..errors import TokenError
from .store import CredentialStore
from .tokens import TokenIssuer, TokenValidator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store


def get_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_validator(request: Request) -> TokenValidator:
    return request.app.state.token_validator


def require_session(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> Dict[str, Any]:
    """Return the claims of the caller's session token.

    The token is read from the session cookie, falling back to an
    ``Authorization: Bearer`` header. Raises a ``TokenError`` (401) when
    no token is presented or it fails validation.
    """
    settings: Settings = request.app.state.settings
    token = request.cookies.get(settings.cookie_name)
    if not token and authorization and authorization.startswith("Bearer "):
        token = authorization[7:].strip()
    if not token:
        raise TokenError("Login required")
    claims = get_validator(request).validate(token)
    request.state.username = claims.get("sub")
    return claims
