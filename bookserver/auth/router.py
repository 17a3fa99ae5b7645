"""
Route definitions for registration and session handling.

Endpoints:
- POST /signIn : register a new user
- POST /login  : verify credentials and set the ``jwt`` session cookie
- POST /logout : overwrite the session cookie with an expired one
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..config import Settings
from ..errors import NotFound, Unauthorized
from .deps import get_credential_store, get_issuer, get_settings
from .schemas import Credentials
from .store import CredentialStore
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signIn", status_code=201, response_class=PlainTextResponse)
def sign_in(
    cred: Credentials,
    store: CredentialStore = Depends(get_credential_store),
):
    store.create(cred.username, cred.password)
    logger.info("User %s registered", cred.username)
    return PlainTextResponse(f"User {cred.username} registered successfully", status_code=201)


@router.post("/login", response_class=PlainTextResponse)
def login(
    cred: Credentials,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_issuer),
    settings: Settings = Depends(get_settings),
):
    try:
        store.verify_password(cred.username, cred.password)
    except (NotFound, Unauthorized) as exc:
        logger.warning("Login failed for %s: %s", cred.username, exc.message)
        raise

    issued = issuer.issue(cred.username)
    response = PlainTextResponse("Login successful")
    response.set_cookie(
        key=settings.cookie_name,
        value=issued.token,
        expires=issued.expires_at,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    logger.info("User %s logged in", cred.username)
    return response


@router.post("/logout", response_class=PlainTextResponse)
def logout(settings: Settings = Depends(get_settings)):
    response = PlainTextResponse("Logged out")
    response.delete_cookie(
        key=settings.cookie_name,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return response
