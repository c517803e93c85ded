from .base import OAuthProvider
from .facebook import FacebookOAuthProvider
from .github import GitHubOAuthProvider
from .google import GoogleOAuthProvider
from .instagram import InstagramOAuthProvider
from .linkedin import LinkedInOAuthProvider


class OAuthProviderRegistry:
    """Registry of provider classes, keyed by the name used in configuration."""

    def __init__(self) -> None:
        self._providers: dict[str, type[OAuthProvider]] = {}

    def register(self, provider_cls: type[OAuthProvider]) -> None:
        """Register an OAuth provider class."""
        self._providers[provider_cls.name] = provider_cls

    def get(self, name: str) -> type[OAuthProvider] | None:
        """Get an OAuth provider class by name."""
        return self._providers.get(name.lower())

    def list_providers(self) -> list[str]:
        """List all registered provider names."""
        return list(self._providers.keys())


oauth_provider_registry = OAuthProviderRegistry()

# Register built-in providers
for _provider_cls in (
    GoogleOAuthProvider,
    GitHubOAuthProvider,
    FacebookOAuthProvider,
    LinkedInOAuthProvider,
    InstagramOAuthProvider,
):
    oauth_provider_registry.register(_provider_cls)
