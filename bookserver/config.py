"""
Configuration for the book server.

Values come from environment variables, optionally seeded from a
``.env`` file in the working directory. ``load_settings()`` is the only
place that touches the environment; everything else receives a
``Settings`` instance from the app factory.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> Settings field
ENV_FIELDS: Dict[str, str] = {
    "BOOKSERVER_JWT_SECRET": "jwt_secret",
    "BOOKSERVER_JWT_AUDIENCE": "jwt_audience",
    "BOOKSERVER_TOKEN_TTL_MINUTES": "token_ttl_minutes",
    "BOOKSERVER_COOKIE_NAME": "cookie_name",
    "BOOKSERVER_COOKIE_SECURE": "cookie_secure",
    "BOOKSERVER_REQUIRE_SESSION": "require_session",
    "BOOKSERVER_SEED_DEMO": "seed_demo",
    "HOST": "host",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    """Runtime settings.

    ``jwt_secret`` has no default: a signing key must always be supplied
    by the deployment.
    """

    jwt_secret: str = Field(min_length=1)
    jwt_audience: str = "bookserver"
    token_ttl_minutes: int = Field(default=20, gt=0)
    cookie_name: str = "jwt"
    cookie_secure: bool = False
    require_session: bool = False
    seed_demo: bool = False
    host: str = "127.0.0.1"
    port: int = Field(default=8080, gt=0, lt=65536)
    log_level: str = "INFO"


def normalize_log_level(value: Optional[str]) -> str:
    level = (value or "INFO").strip().upper()
    if level not in VALID_LOG_LEVELS:
        logger.warning("Invalid LOG_LEVEL %r, using INFO", value)
        return "INFO"
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from the environment.

    When ``environ`` is omitted, ``.env`` is loaded first and
    ``os.environ`` is read. Raises ``ConfigError`` when the signing
    secret is missing or a value cannot be parsed.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    for env_name, field in ENV_FIELDS.items():
        raw = environ.get(env_name)
        if raw is not None and raw.strip() != "":
            values[field] = raw.strip()

    if "jwt_secret" not in values:
        raise ConfigError("BOOKSERVER_JWT_SECRET must be set")
    values["log_level"] = normalize_log_level(values.get("log_level"))

    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
