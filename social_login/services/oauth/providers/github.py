"""GitHub OAuth app implementation."""
from typing import Any

from .base import OAuthProvider


class GitHubOAuthProvider(OAuthProvider):
    """GitHub OAuth app implementation.

    GitHub only exposes a single display name, so ``first_name`` and
    ``last_name`` are always None.
    """

    name = "github"
    display_name = "GitHub"
    default_scopes = ("read:user", "user:email")

    @property
    def authorization_url(self) -> str:
        return "https://github.com/login/oauth/authorize"

    @property
    def token_url(self) -> str:
        return "https://github.com/login/oauth/access_token"

    @property
    def user_info_url(self) -> str:
        return "https://api.github.com/user"

    def token_request_headers(self) -> dict[str, str]:
        # Without it the token comes back form-encoded
        return {"Accept": "application/json"}

    def user_info_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.access_token}",
        }

    def user_info_params(self) -> dict[str, str]:
        return {}

    def parse_token_response(self, body: str) -> str:
        return self.parse_json_token_response(body)

    def parse_user_data_response(self, body: str) -> dict[str, Any]:
        return self.parse_json_user_data(body)

    def user_id(self) -> str | None:
        return self.get_provider_user_string("id")

    def nickname(self) -> str | None:
        return self.get_provider_user_data("login")

    def first_name(self) -> str | None:
        return None

    def last_name(self) -> str | None:
        return None

    def email(self) -> str | None:
        return self.get_provider_user_data("email")

    def image_url(self) -> str | None:
        return self.get_provider_user_data("avatar_url")
