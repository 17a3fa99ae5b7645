"""
Session token issuance and validation.

A session token is a compact HS256 JWS (``header.payload.signature``)
produced by PyJWT. It carries the configured audience, an expiration of
issue time plus the TTL, the username as ``sub`` and the issue time.
The server keeps no session record: a token is valid as long as its
signature verifies and it has not expired.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

import jwt

from ..errors import SigningFailed, TokenExpired, TokenMalformed, TokenSignatureInvalid
from .schemas import IssuedToken

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(minutes=20)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _header_parses(token: str) -> bool:
    try:
        jwt.get_unverified_header(token)
    except jwt.PyJWTError:
        return False
    return True


class TokenIssuer:
    """Signs session tokens with a pre-shared secret."""

    def __init__(
        self,
        secret: str,
        audience: str,
        ttl: timedelta = DEFAULT_TTL,
        algorithm: str = ALGORITHM,
        clock: Clock = utcnow,
    ):
        self._secret = secret
        self.audience = audience
        self.ttl = ttl
        self.algorithm = algorithm
        self._clock = clock

    def issue(self, username: str) -> IssuedToken:
        """Return a signed token for ``username`` and its expiry time.

        Raises ``SigningFailed`` when the secret is empty or the signing
        library rejects the key or algorithm.
        """
        if not self._secret:
            raise SigningFailed("Cannot sign token: signing secret is not configured")

        # JWT timestamps have one-second resolution; keep the cookie in step.
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self.ttl
        claims = {
            "aud": self.audience,
            "sub": username,
            "iat": issued_at,
            "exp": expires_at,
        }
        try:
            token = jwt.encode(claims, self._secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            logger.error("Token signing failed: %s", exc)
            raise SigningFailed("Cannot sign token") from exc
        return IssuedToken(token=token, expires_at=expires_at)


class TokenValidator:
    """Verifies session tokens produced by ``TokenIssuer``.

    Only ``HS256`` is accepted; a token whose header names any other
    algorithm, ``none`` included, fails signature verification.
    """

    def __init__(self, secret: str, audience: str, algorithm: str = ALGORITHM):
        self._secret = secret
        self.audience = audience
        self.algorithm = algorithm

    def validate(self, token: str) -> Dict[str, Any]:
        if not token or token.count(".") != 2:
            raise TokenMalformed()
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                options={"require": ["exp", "aud"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            raise TokenSignatureInvalid() from exc
        except jwt.DecodeError as exc:
            # A readable header means the damage is in the payload or signature bytes.
            if _header_parses(token):
                raise TokenSignatureInvalid() from exc
            logger.debug("Rejected token: %s", exc)
            raise TokenMalformed() from exc
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected token: %s", exc)
            raise TokenMalformed() from exc
