"""Tests for the authorization code flow implemented by the provider base class."""
from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, quote_plus, urlparse

import httpx
import pytest
from pydantic import ValidationError

from social_login.models.schemas import ProviderConfig, ProviderUserDetails
from social_login.services.oauth.exceptions import (
    ApplicationRejectedError,
    InvalidAuthorizationCodeError,
    OAuthProviderError,
    UserInfoRequestError,
)
from social_login.services.oauth.providers.base import OAuthProvider


class ExampleProvider(OAuthProvider):
    name = "example"
    display_name = "Example"

    @property
    def authorization_url(self) -> str:
        return "https://auth.example.com/authorize"

    @property
    def token_url(self) -> str:
        return "https://auth.example.com/token"

    @property
    def user_info_url(self) -> str:
        return "https://api.example.com/me"

    def parse_token_response(self, body: str) -> str:
        return self.parse_json_token_response(body)

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
        return self.get_provider_user_data("avatar")


def _query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlparse(url).query)


class TestAuthorizationUrl:
    @pytest.mark.parametrize(
        "scopes",
        [
            (),
            ("email",),
            ("email", "profile"),
            ("user:email", "read:org", "repo"),
        ],
    )
    def test_scope_is_comma_joined_and_encoded(self, scopes, provider_config) -> None:
        config = provider_config.model_copy(update={"scopes": scopes})
        provider = ExampleProvider(config, httpx.Client())

        url = provider.get_authorization_url("state-1")

        assert f"scope={quote_plus(','.join(scopes))}" in url
        if scopes:
            assert _query(url)["scope"] == [",".join(scopes)]

    def test_contains_flow_parameters(self, provider_config) -> None:
        provider = ExampleProvider(provider_config, httpx.Client())

        url = provider.get_authorization_url("xyz-state")

        assert url.startswith("https://auth.example.com/authorize?")
        query = _query(url)
        assert query["client_id"] == ["client-123"]
        assert query["redirect_uri"] == ["https://app.example.com/auth/callback"]
        assert query["response_type"] == ["code"]
        assert query["state"] == ["xyz-state"]

    def test_configured_scopes_follow_defaults(self, provider_config) -> None:
        class WithDefaults(ExampleProvider):
            default_scopes = ("basic",)

        config = provider_config.model_copy(update={"scopes": ("extra",)})
        provider = WithDefaults(config, httpx.Client())

        assert provider.compile_scopes() == "basic,extra"


class TestGetUserDetails:
    def test_missing_code_rejected_before_network(self, provider_config, mock_http) -> None:
        http = mock_http(lambda request: httpx.Response(200, json={"access_token": "abc"}))
        provider = ExampleProvider(provider_config, http.client, {"state": "s"})

        with pytest.raises(ApplicationRejectedError):
            provider.get_user_details()

        assert http.requests == []

    def test_empty_code_rejected(self, provider_config, mock_http) -> None:
        http = mock_http(lambda request: httpx.Response(200))
        provider = ExampleProvider(provider_config, http.client, {"code": ""})

        with pytest.raises(ApplicationRejectedError) as exc:
            provider.get_user_details()

        assert exc.value.status_code == 401
        assert http.requests == []

    def test_token_endpoint_error_carries_body(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(provider_endpoints(token=(400, '{"error": "bad_verification_code"}')))
        provider = ExampleProvider(provider_config, http.client, {"code": "expired"})

        with pytest.raises(InvalidAuthorizationCodeError) as exc:
            provider.get_user_details()

        assert exc.value.response_body == '{"error": "bad_verification_code"}'
        assert exc.value.details["response_body"] == '{"error": "bad_verification_code"}'
        assert len(http.requests) == 1

    def test_token_response_without_access_token(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(provider_endpoints(token=(200, {"error": "invalid_grant"})))
        provider = ExampleProvider(provider_config, http.client, {"code": "c"})

        with pytest.raises(InvalidAuthorizationCodeError):
            provider.get_user_details()

    def test_token_response_not_json(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(provider_endpoints(token=(200, "<html>oops</html>")))
        provider = ExampleProvider(provider_config, http.client, {"code": "c"})

        with pytest.raises(InvalidAuthorizationCodeError):
            provider.get_user_details()

    def test_successful_flow(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(
            provider_endpoints(
                token=(200, {"access_token": "abc123"}),
                user=(200, {"id": "42", "name": "Jane"}),
            )
        )
        provider = ExampleProvider(provider_config, http.client, {"code": "auth-code"})

        details = provider.get_user_details()

        assert details.access_token == "abc123"
        assert details.user_id == "42"
        assert details.nickname == "Jane"
        assert details.raw == {"id": "42", "name": "Jane"}

    def test_missing_profile_fields_are_none(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(
            provider_endpoints(
                token=(200, {"access_token": "abc123"}),
                user=(200, {"id": 7}),
            )
        )
        provider = ExampleProvider(provider_config, http.client, {"code": "auth-code"})

        details = provider.get_user_details()

        assert details.user_id == "7"
        assert details.email is None
        assert details.first_name is None
        assert details.last_name is None
        assert details.image_url is None

    def test_token_request_shape(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(
            provider_endpoints(
                token=(200, {"access_token": "abc123"}),
                user=(200, {"id": "42"}),
            )
        )
        provider = ExampleProvider(provider_config, http.client, {"code": "auth-code"})

        provider.get_user_details()

        token_request, user_request = http.requests
        assert token_request.method == "POST"
        assert str(token_request.url) == "https://auth.example.com/token"
        assert parse_qs(token_request.content.decode()) == {
            "code": ["auth-code"],
            "client_id": ["client-123"],
            "client_secret": ["secret-456"],
            "redirect_uri": ["https://app.example.com/auth/callback"],
            "grant_type": ["authorization_code"],
        }
        assert user_request.method == "GET"
        assert user_request.url.host == "api.example.com"
        assert user_request.url.params["access_token"] == "abc123"

    def test_user_info_error(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(
            provider_endpoints(
                token=(200, {"access_token": "abc123"}),
                user=(401, "token revoked"),
            )
        )
        provider = ExampleProvider(provider_config, http.client, {"code": "auth-code"})

        with pytest.raises(UserInfoRequestError) as exc:
            provider.get_user_details()

        assert exc.value.details["response_body"] == "token revoked"

    def test_user_info_not_an_object(self, provider_config, mock_http, provider_endpoints) -> None:
        http = mock_http(
            provider_endpoints(
                token=(200, {"access_token": "abc123"}),
                user=(200, "[1, 2, 3]"),
            )
        )
        provider = ExampleProvider(provider_config, http.client, {"code": "auth-code"})

        with pytest.raises(UserInfoRequestError):
            provider.get_user_details()

    def test_transport_failure(self, provider_config, mock_http) -> None:
        def _unreachable(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        http = mock_http(_unreachable)
        provider = ExampleProvider(provider_config, http.client, {"code": "auth-code"})

        with pytest.raises(OAuthProviderError) as exc:
            provider.get_user_details()

        assert not isinstance(exc.value, InvalidAuthorizationCodeError)
        assert exc.value.code == "OAU100"


class TestQueryTokenParser:
    def test_parses_access_token(self, provider_config) -> None:
        provider = ExampleProvider(provider_config, httpx.Client())
        assert provider.parse_query_token_response("access_token=tok&expires=5183999") == "tok"

    def test_missing_access_token(self, provider_config) -> None:
        provider = ExampleProvider(provider_config, httpx.Client())
        with pytest.raises(InvalidAuthorizationCodeError):
            provider.parse_query_token_response("error=denied")


class TestProviderUserDetails:
    def test_requires_access_token(self) -> None:
        with pytest.raises(ValidationError):
            ProviderUserDetails(access_token="", raw={})

    def test_is_immutable(self) -> None:
        details = ProviderUserDetails(access_token="abc", user_id="1", raw={"id": "1"})
        with pytest.raises(ValidationError):
            details.email = "new@example.com"

    def test_config_is_immutable(self, provider_config: ProviderConfig) -> None:
        with pytest.raises(ValidationError):
            provider_config.client_id = "other"
