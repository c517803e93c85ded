"""Instagram Basic Display implementation."""
from typing import Any

from .base import OAuthProvider


class InstagramOAuthProvider(OAuthProvider):
    """Instagram Basic Display implementation.

    The profile only carries an id and a username; every other field is None.
    """

    name = "instagram"
    display_name = "Instagram"
    default_scopes = ("user_profile",)

    @property
    def authorization_url(self) -> str:
        return "https://api.instagram.com/oauth/authorize"

    @property
    def token_url(self) -> str:
        return "https://api.instagram.com/oauth/access_token"

    @property
    def user_info_url(self) -> str:
        return "https://graph.instagram.com/me"

    def user_info_params(self) -> dict[str, str]:
        params = super().user_info_params()
        params["fields"] = "id,username"
        return params

    def parse_token_response(self, body: str) -> str:
        return self.parse_json_token_response(body)

    def parse_user_data_response(self, body: str) -> dict[str, Any]:
        return self.parse_json_user_data(body)

    def user_id(self) -> str | None:
        return self.get_provider_user_string("id")

    def nickname(self) -> str | None:
        return self.get_provider_user_data("username")

    def first_name(self) -> str | None:
        return None

    def last_name(self) -> str | None:
        return None

    def email(self) -> str | None:
        return None

    def image_url(self) -> str | None:
        return None
