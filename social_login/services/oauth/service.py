"""OAuth service coordinating a social login attempt.

Responsibilities:
- Issue and check the CSRF state token
- Build the right provider for each request
- Hand the normalized user details to the authenticator

Failures are reported through ``LoginResult`` rather than raised, so callers
match on the outcome explicitly.
"""
import logging
import secrets
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

import httpx

from social_login.core.exceptions import SocialLoginException
from social_login.models.schemas import ProviderConfig, ProviderUserDetails

from .authenticator import Authenticator, LoginCallback
from .exceptions import InvalidStateError, ProviderNotRegisteredError
from .providers import OAuthProvider, OAuthProviderRegistry, oauth_provider_registry

logger = logging.getLogger(__name__)

STATE_SESSION_KEY = "oauth.state"


@dataclass
class LoginResult:
    success: bool
    user: Any = None
    details: ProviderUserDetails | None = None
    error: SocialLoginException | None = None

    @property
    def error_message(self) -> str | None:
        if self.error:
            return self.error.message
        return None


class OAuthService:
    """
    OAuth service for social login.

    Holds configuration only; every call builds a fresh provider so no state
    leaks between requests.
    """

    def __init__(
        self,
        providers: Mapping[str, ProviderConfig],
        http_client: httpx.Client,
        authenticator: Authenticator | None = None,
        registry: OAuthProviderRegistry = oauth_provider_registry,
    ):
        """
        Initialize OAuth service.

        Args:
            providers: Provider configuration keyed by provider name
            http_client: Client shared by the providers for outbound calls
            authenticator: Resolves details to users; without one ``login``
                returns the details alone
            registry: Provider classes available for dispatch
        """
        self._configs = dict(providers)
        self._http_client = http_client
        self._authenticator = authenticator
        self._registry = registry

    def list_providers(self) -> list[str]:
        """Names of providers that are both configured and implemented."""
        return [name for name in self._configs if self._registry.get(name) is not None]

    def get_provider(self, name: str, request_params: Mapping[str, str] | None = None) -> OAuthProvider:
        """
        Build the provider registered under ``name`` for one request.

        Raises:
            ProviderNotRegisteredError: If no provider class or configuration exists
        """
        provider_cls = self._registry.get(name)
        config = self._configs.get(name.lower())
        if provider_cls is None or config is None:
            raise ProviderNotRegisteredError(name)
        return provider_cls(config, self._http_client, request_params)

    def authorize(self, name: str, state_store: MutableMapping[str, Any]) -> str:
        """
        Start a login: remember a fresh state token and return the redirect URL.

        Args:
            name: Provider name
            state_store: Per-user storage that survives until the callback,
                typically the web session
        """
        provider = self.get_provider(name)
        state = secrets.token_hex(16)
        state_store[STATE_SESSION_KEY] = state
        logger.info(f"Initiating OAuth login with {name}")
        return provider.get_authorization_url(state)

    def login(
        self,
        name: str,
        request_params: Mapping[str, str],
        state_store: MutableMapping[str, Any],
        callback: LoginCallback | None = None,
    ) -> LoginResult:
        """
        Complete a login from the provider callback.

        Args:
            name: Provider name
            request_params: Query parameters of the callback request
            state_store: Same storage passed to ``authorize``
            callback: Forwarded to the authenticator

        Returns:
            LoginResult; on failure ``error`` holds the reason
        """
        try:
            self._verify_state(request_params, state_store)
            provider = self.get_provider(name, request_params)
            details = provider.get_user_details()
            if self._authenticator is None:
                return LoginResult(success=True, details=details)
            user = self._authenticator.login(provider.name, details, callback)
        except SocialLoginException as e:
            logger.warning(f"OAuth login with {name} failed | code={e.code} reason={e.message}")
            return LoginResult(success=False, error=e)
        return LoginResult(success=True, user=user, details=details)

    def _verify_state(self, request_params: Mapping[str, str], state_store: MutableMapping[str, Any]) -> None:
        # Single use: popped whether or not it matches
        expected = state_store.pop(STATE_SESSION_KEY, None)
        received = request_params.get("state")
        if not expected or not received or not secrets.compare_digest(str(expected), str(received)):
            raise InvalidStateError()
