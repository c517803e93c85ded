"""Google OAuth 2.0 / OpenID Connect implementation."""
from typing import Any

from .base import OAuthProvider


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 2.0 / OpenID Connect implementation."""

    name = "google"
    display_name = "Google"
    default_scopes = ("openid", "email", "profile")
    # Google expects space-delimited scopes
    scope_separator = " "

    @property
    def authorization_url(self) -> str:
        return "https://accounts.google.com/o/oauth2/v2/auth"

    @property
    def token_url(self) -> str:
        return "https://oauth2.googleapis.com/token"

    @property
    def user_info_url(self) -> str:
        return "https://www.googleapis.com/oauth2/v3/userinfo"

    def parse_token_response(self, body: str) -> str:
        return self.parse_json_token_response(body)

    def parse_user_data_response(self, body: str) -> dict[str, Any]:
        return self.parse_json_user_data(body)

    def user_id(self) -> str | None:
        return self.get_provider_user_string("sub")

    def nickname(self) -> str | None:
        # Google has no handle; the address is the closest stable equivalent
        return self.get_provider_user_data("email")

    def first_name(self) -> str | None:
        return self.get_provider_user_data("given_name")

    def last_name(self) -> str | None:
        return self.get_provider_user_data("family_name")

    def email(self) -> str | None:
        return self.get_provider_user_data("email")

    def image_url(self) -> str | None:
        return self.get_provider_user_data("picture")
