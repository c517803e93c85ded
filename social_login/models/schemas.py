"""OAuth-related schemas."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Credentials and redirect settings for one provider."""
    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str = ""
    redirect_uri: str = ""
    scopes: tuple[str, ...] = ()


class ProviderUserDetails(BaseModel):
    """Normalized profile returned by a completed authorization flow.

    ``raw`` keeps the parsed provider response untouched so callers can
    reach fields the normalized view does not cover.
    """
    model_config = ConfigDict(frozen=True)

    access_token: str = Field(min_length=1)
    user_id: str | None = None
    nickname: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    image_url: str | None = None
    raw: dict[str, Any]


class OAuthProviderInfo(BaseModel):
    """Information about a configured OAuth provider."""
    name: str
    display_name: str


class OAuthProvidersOut(BaseModel):
    """List of available OAuth providers."""
    providers: list[OAuthProviderInfo]


class OAuthCallbackOut(BaseModel):
    """Response from a successful OAuth callback."""
    provider: str
    user_id: int | None = None
    provider_user_id: str | None = None
    nickname: str | None = None
    email: str | None = None
