"""Facebook Login implementation."""
from typing import Any

from .base import OAuthProvider


class FacebookOAuthProvider(OAuthProvider):
    """Facebook Login implementation.

    The token endpoint answers with JSON on current Graph API versions and
    with a query string on legacy ones; both are accepted.
    """

    name = "facebook"
    display_name = "Facebook"
    default_scopes = ("email",)

    @property
    def authorization_url(self) -> str:
        return "https://www.facebook.com/dialog/oauth"

    @property
    def token_url(self) -> str:
        return "https://graph.facebook.com/oauth/access_token"

    @property
    def user_info_url(self) -> str:
        return "https://graph.facebook.com/me"

    def user_info_params(self) -> dict[str, str]:
        params = super().user_info_params()
        params["fields"] = "id,name,first_name,last_name,email"
        return params

    def parse_token_response(self, body: str) -> str:
        if body.lstrip().startswith("{"):
            return self.parse_json_token_response(body)
        return self.parse_query_token_response(body)

    def parse_user_data_response(self, body: str) -> dict[str, Any]:
        return self.parse_json_user_data(body)

    def user_id(self) -> str | None:
        return self.get_provider_user_string("id")

    def nickname(self) -> str | None:
        return self.get_provider_user_data("name")

    def first_name(self) -> str | None:
        return self.get_provider_user_data("first_name")

    def last_name(self) -> str | None:
        return self.get_provider_user_data("last_name")

    def email(self) -> str | None:
        return self.get_provider_user_data("email")

    def image_url(self) -> str | None:
        user_id = self.user_id()
        if user_id is None:
            return None
        return f"https://graph.facebook.com/{user_id}/picture"
