from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    """Login / registration payload."""

    username: str = Field(min_length=1)
    password: str

    @field_validator("username", "password")
    @classmethod
    def encodable_as_utf8(cls, value: str) -> str:
        # JSON can carry lone surrogates ("\ud800") that no UTF-8 consumer accepts.
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text")
        return value


class IssuedToken(BaseModel):
    """A freshly signed session token and the moment it stops being valid."""

    token: str
    expires_at: datetime
