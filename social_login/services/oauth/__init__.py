"""Social login over OAuth 2.0.

Providers:
- Google (OAuth 2.0 + OpenID Connect)
- GitHub
- Facebook
- LinkedIn (OpenID Connect)
- Instagram (Basic Display)
"""
from .authenticator import Authenticator
from .exceptions import (
    ApplicationRejectedError,
    IdentityStorageError,
    InvalidAuthorizationCodeError,
    InvalidStateError,
    OAuthProviderError,
    ProviderNotRegisteredError,
    UserInfoRequestError,
)
from .factory import create_oauth_service
from .identity_store import IdentityStore
from .providers import (
    FacebookOAuthProvider,
    GitHubOAuthProvider,
    GoogleOAuthProvider,
    InstagramOAuthProvider,
    LinkedInOAuthProvider,
    OAuthProvider,
    oauth_provider_registry,
)
from .service import LoginResult, OAuthService

__all__ = [
    # Exceptions
    "OAuthProviderError",
    "ApplicationRejectedError",
    "IdentityStorageError",
    "InvalidAuthorizationCodeError",
    "InvalidStateError",
    "ProviderNotRegisteredError",
    "UserInfoRequestError",
    # Providers
    "OAuthProvider",
    "FacebookOAuthProvider",
    "GitHubOAuthProvider",
    "GoogleOAuthProvider",
    "InstagramOAuthProvider",
    "LinkedInOAuthProvider",
    "oauth_provider_registry",
    # Service
    "Authenticator",
    "IdentityStore",
    "LoginResult",
    "OAuthService",
    # Factory
    "create_oauth_service",
]
