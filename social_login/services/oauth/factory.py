"""Factory function for creating configured OAuth service."""
import logging

import httpx
from sqlalchemy.orm import Session

from social_login.core.config import BaseAppSettings, settings
from social_login.core.exceptions import ConfigurationError
from social_login.models.schemas import ProviderConfig

from .authenticator import Authenticator
from .providers import oauth_provider_registry
from .service import OAuthService

logger = logging.getLogger(__name__)


def enabled_providers(app_settings: BaseAppSettings) -> dict[str, ProviderConfig]:
    """
    Provider configuration that is complete enough to use.

    Raises:
        ConfigurationError: If a provider has a client id but no secret or redirect URI
    """
    enabled: dict[str, ProviderConfig] = {}
    for name, config in app_settings.PROVIDERS.items():
        if not config.client_id:
            logger.warning(f"{name} OAuth not configured (missing client ID)")
            continue
        if oauth_provider_registry.get(name) is None:
            logger.warning(f"Ignoring configuration for unknown OAuth provider: {name}")
            continue
        if not config.client_secret:
            raise ConfigurationError(f"PROVIDERS.{name}.client_secret")
        if not config.redirect_uri:
            raise ConfigurationError(f"PROVIDERS.{name}.redirect_uri")
        enabled[name] = config
        logger.info(f"{name} OAuth provider enabled")
    return enabled


def create_oauth_service(
    db: Session | None = None,
    user_model: type | None = None,
    http_client: httpx.Client | None = None,
    app_settings: BaseAppSettings | None = None,
) -> OAuthService:
    """
    Factory function to create configured OAuth service.

    Args:
        db: Database session; together with ``user_model`` enables user resolution
        user_model: Host user model class
        http_client: Client for provider calls (default: one using HTTP_TIMEOUT)
        app_settings: Settings to read (default: process settings)

    Returns:
        Configured OAuthService instance
    """
    app_settings = app_settings or settings
    authenticator = None
    if db is not None and user_model is not None:
        authenticator = Authenticator(db, user_model)
    client = http_client or httpx.Client(timeout=app_settings.HTTP_TIMEOUT)
    return OAuthService(enabled_providers(app_settings), client, authenticator)
