"""LinkedIn (Sign In with LinkedIn using OpenID Connect) implementation."""
from typing import Any

from .base import OAuthProvider


class LinkedInOAuthProvider(OAuthProvider):
    name = "linkedin"
    display_name = "LinkedIn"
    default_scopes = ("openid", "profile", "email")
    scope_separator = " "

    @property
    def authorization_url(self) -> str:
        return "https://www.linkedin.com/oauth/v2/authorization"

    @property
    def token_url(self) -> str:
        return "https://www.linkedin.com/oauth/v2/accessToken"

    @property
    def user_info_url(self) -> str:
        return "https://api.linkedin.com/v2/userinfo"

    def user_info_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    def user_info_params(self) -> dict[str, str]:
        return {}

    def parse_token_response(self, body: str) -> str:
        return self.parse_json_token_response(body)

    def parse_user_data_response(self, body: str) -> dict[str, Any]:
        return self.parse_json_user_data(body)

    def user_id(self) -> str | None:
        return self.get_provider_user_string("sub")

    def nickname(self) -> str | None:
        return self.get_provider_user_data("name")

    def first_name(self) -> str | None:
        return self.get_provider_user_data("given_name")

    def last_name(self) -> str | None:
        return self.get_provider_user_data("family_name")

    def email(self) -> str | None:
        return self.get_provider_user_data("email")

    def image_url(self) -> str | None:
        return self.get_provider_user_data("picture")
