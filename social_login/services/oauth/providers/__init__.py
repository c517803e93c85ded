"""OAuth providers module."""
from .base import OAuthProvider
from .facebook import FacebookOAuthProvider
from .github import GitHubOAuthProvider
from .google import GoogleOAuthProvider
from .instagram import InstagramOAuthProvider
from .linkedin import LinkedInOAuthProvider
from .registry import OAuthProviderRegistry, oauth_provider_registry

__all__ = [
    "OAuthProvider",
    "FacebookOAuthProvider",
    "GitHubOAuthProvider",
    "GoogleOAuthProvider",
    "InstagramOAuthProvider",
    "LinkedInOAuthProvider",
    "OAuthProviderRegistry",
    "oauth_provider_registry",
]
