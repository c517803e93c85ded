from __future__ import annotations

import os
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from social_login.models.schemas import ProviderConfig


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_LOGIN_",
        # Published by `social-login install`; a project .env takes precedence
        env_file=("config/social_login.env", ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # text | json

    # Outbound requests to provider endpoints
    HTTP_TIMEOUT: float = 10.0

    # Installer destinations (relative to the host project root)
    CONFIG_PATH: str = "config"
    MIGRATIONS_PATH: str = "alembic/versions"

    IDENTITY_TABLE: str = "oauth_identities"
    SESSION_SECRET: str = "change_me_session"

    # Keyed by provider name, e.g. SOCIAL_LOGIN_PROVIDERS__GITHUB__CLIENT_ID
    PROVIDERS: dict[str, ProviderConfig] = {}

    @model_validator(mode="after")
    def _validate_required_fields(self) -> BaseAppSettings:
        self.PROVIDERS = {name.lower(): cfg for name, cfg in self.PROVIDERS.items()}
        is_prod = isinstance(self, ProdSettings) or self.ENV.lower() in {"prod", "production"}
        if is_prod and self.SESSION_SECRET == "change_me_session":
            raise ValueError("Insecure default secrets in production: SESSION_SECRET uses default placeholder")
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"
    LOG_LEVEL: str = "DEBUG"


class TestSettings(BaseAppSettings):
    ENV: str = "test"


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("SOCIAL_LOGIN_ENV") or os.getenv("ENV") or "dev"
    settings_cls = _ENV_TO_SETTINGS.get(env_name.lower(), DevSettings)
    return settings_cls()


settings = get_settings()
