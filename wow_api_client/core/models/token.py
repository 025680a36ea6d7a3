"""
Token Models

Pydantic models for the OAuth2 client-credentials exchange.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Body returned by the token endpoint."""

    access_token: str = Field(..., min_length=1)
    expires_in: int = Field(..., ge=0)
    token_type: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Credential(BaseModel):
    """An access token together with its lifetime and acquisition instant.

    ``obtained_at`` is a reading of the token manager's clock (monotonic
    by default), not wall-clock time. A credential is replaced on refresh,
    never mutated.
    """

    access_token: str
    expires_in: int
    obtained_at: float

    model_config = ConfigDict(frozen=True)

    @property
    def expires_at(self) -> float:
        """Clock reading at which the credential stops being usable."""
        return self.obtained_at + self.expires_in

    def is_expired(self, now: float) -> bool:
        """Check whether the credential is expired at ``now``."""
        return now >= self.expires_at

    @classmethod
    def from_response(cls, response: TokenResponse, obtained_at: float) -> "Credential":
        """Build a credential from a token endpoint response."""
        return cls(
            access_token=response.access_token,
            expires_in=response.expires_in,
            obtained_at=obtained_at
        )
