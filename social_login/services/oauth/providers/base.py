"""Abstract base class for OAuth 2.0 providers.

Implements the OAuth 2.0 authorization code flow:

1. ``get_authorization_url(state)`` builds the redirect to the provider.
2. ``get_user_details()`` reads the ``code`` the provider sent back,
   exchanges it for an access token, fetches the profile and normalizes it.

Subclasses must implement provider-specific details: the three endpoints,
the two response parsers and the six profile accessors.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar
from urllib.parse import parse_qs, urlencode

import httpx

from social_login.models.schemas import ProviderConfig, ProviderUserDetails

from ..exceptions import (
    ApplicationRejectedError,
    InvalidAuthorizationCodeError,
    OAuthProviderError,
    UserInfoRequestError,
)

logger = logging.getLogger(__name__)


class OAuthProvider(ABC):
    """
    Abstract base class for OAuth 2.0 providers.

    One instance serves a single authorization attempt: it is built with the
    inbound request parameters and discarded once the user details are known.
    """

    name: ClassVar[str]
    display_name: ClassVar[str]

    # Scopes every request asks for; configured scopes are appended
    default_scopes: ClassVar[tuple[str, ...]] = ()
    scope_separator: ClassVar[str] = ","

    def __init__(
        self,
        config: ProviderConfig,
        http_client: httpx.Client,
        request_params: Mapping[str, str] | None = None,
    ):
        """
        Initialize OAuth provider.

        Args:
            config: Client credentials and redirect URI for this provider
            http_client: Client used for the token and user info requests
            request_params: Query parameters of the inbound callback request
        """
        self.client_id = config.client_id
        self.client_secret = config.client_secret
        self.redirect_uri = config.redirect_uri
        self.scopes = [*self.default_scopes, *config.scopes]
        self.http_client = http_client
        self.request_params = request_params or {}

        self.access_token: str | None = None
        self.provider_user_data: dict[str, Any] = {}

    @property
    @abstractmethod
    def authorization_url(self) -> str:
        """Provider's authorization endpoint."""
        pass

    @property
    @abstractmethod
    def token_url(self) -> str:
        """Provider's token exchange endpoint."""
        pass

    @property
    @abstractmethod
    def user_info_url(self) -> str:
        """Provider's user info endpoint."""
        pass

    def compile_scopes(self) -> str:
        return self.scope_separator.join(self.scopes)

    def get_authorization_url(self, state: str) -> str:
        """
        Generate authorization URL for OAuth flow.

        Args:
            state: CSRF protection token, returned untouched on callback

        Returns:
            Full authorization URL with query parameters
        """
        params = {
            "client_id": self.client_id,
            "scope": self.compile_scopes(),
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "state": state,
        }
        return f"{self.authorization_url}?{urlencode(params)}"

    def token_request_headers(self) -> dict[str, str]:
        return {}

    def user_info_headers(self) -> dict[str, str]:
        return {}

    def user_info_params(self) -> dict[str, str]:
        return {"access_token": self.access_token or ""}

    def get_authorization_code(self) -> str:
        code = self.request_params.get("code")
        if not code:
            logger.info(f"No authorization code on callback | provider={self.name}")
            raise ApplicationRejectedError()
        return code

    def get_user_details(self) -> ProviderUserDetails:
        """
        Complete the flow started by ``get_authorization_url``.

        Returns:
            Normalized user details

        Raises:
            ApplicationRejectedError: callback carried no authorization code
            InvalidAuthorizationCodeError: token exchange was refused
            UserInfoRequestError: profile could not be fetched
            OAuthProviderError: provider could not be reached
        """
        self.access_token = self.request_access_token()
        self.provider_user_data = self.request_user_data()
        return ProviderUserDetails(
            access_token=self.access_token,
            user_id=self.user_id(),
            nickname=self.nickname(),
            first_name=self.first_name(),
            last_name=self.last_name(),
            email=self.email(),
            image_url=self.image_url(),
            raw=self.provider_user_data,
        )

    def request_access_token(self) -> str:
        """
        Exchange the inbound authorization code for an access token.

        Raises:
            InvalidAuthorizationCodeError: If token exchange fails
        """
        data = {
            "code": self.get_authorization_code(),
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "grant_type": "authorization_code",
        }
        logger.info(
            f"Token exchange attempt | "
            f"provider={self.name} "
            f"client_id={self.client_id} "
            f"redirect_uri={self.redirect_uri}"
        )

        try:
            response = self.http_client.post(
                self.token_url, data=data, headers=self.token_request_headers()
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Token exchange failed | "
                f"provider={self.name} "
                f"status={e.response.status_code}"
            )
            raise InvalidAuthorizationCodeError(e.response.text) from e
        except httpx.RequestError as e:
            logger.error(f"Token exchange request failed | provider={self.name} error={e}")
            raise OAuthProviderError("Failed to connect to OAuth provider") from e

        access_token = self.parse_token_response(response.text)
        logger.info(f"Token exchange SUCCESS | provider={self.name}")
        return access_token

    def request_user_data(self) -> dict[str, Any]:
        """
        Fetch the profile of the user the access token belongs to.

        Raises:
            UserInfoRequestError: If fetching user info fails
        """
        try:
            response = self.http_client.get(
                self.user_info_url,
                params=self.user_info_params(),
                headers=self.user_info_headers(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"User info fetch failed | provider={self.name} status={e.response.status_code}")
            raise UserInfoRequestError(str(e.response.status_code), e.response.text) from e
        except httpx.RequestError as e:
            logger.error(f"User info request failed | provider={self.name} error={e}")
            raise OAuthProviderError("Failed to connect to OAuth provider") from e

        return self.parse_user_data_response(response.text)

    @abstractmethod
    def parse_token_response(self, body: str) -> str:
        """Extract the access token from a successful token endpoint response."""
        pass

    @abstractmethod
    def parse_user_data_response(self, body: str) -> dict[str, Any]:
        """Turn the user info response into a field mapping."""
        pass

    def parse_json_token_response(self, body: str) -> str:
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise InvalidAuthorizationCodeError(body) from e
        if not isinstance(payload, dict) or not payload.get("access_token"):
            raise InvalidAuthorizationCodeError(body)
        return str(payload["access_token"])

    def parse_query_token_response(self, body: str) -> str:
        # access_token=...&expires=... as returned by older Graph API versions
        values = parse_qs(body).get("access_token")
        if not values:
            raise InvalidAuthorizationCodeError(body)
        return values[0]

    def parse_json_user_data(self, body: str) -> dict[str, Any]:
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise UserInfoRequestError("response is not valid JSON", body) from e
        if not isinstance(payload, dict):
            raise UserInfoRequestError("unexpected response shape", body)
        return payload

    def get_provider_user_data(self, key: str) -> Any:
        return self.provider_user_data.get(key)

    def get_provider_user_string(self, key: str) -> str | None:
        value = self.get_provider_user_data(key)
        return None if value is None else str(value)

    @abstractmethod
    def user_id(self) -> str | None:
        pass

    @abstractmethod
    def nickname(self) -> str | None:
        pass

    @abstractmethod
    def first_name(self) -> str | None:
        pass

    @abstractmethod
    def last_name(self) -> str | None:
        pass

    @abstractmethod
    def email(self) -> str | None:
        pass

    @abstractmethod
    def image_url(self) -> str | None:
        pass
