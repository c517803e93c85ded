"""Persistence of provider identities."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from social_login.models.oauth_identity import OAuthIdentity

logger = logging.getLogger(__name__)


class IdentityStore:
    """Reads and writes ``OAuthIdentity`` rows through a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_provider(self, provider: str, provider_user_id: str) -> OAuthIdentity | None:
        stmt = select(OAuthIdentity).where(
            OAuthIdentity.provider == provider,
            OAuthIdentity.provider_user_id == provider_user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def user_exists(self, provider: str, provider_user_id: str) -> bool:
        return self.get_by_provider(provider, provider_user_id) is not None

    def store(self, identity: OAuthIdentity) -> None:
        self.db.add(identity)

    def flush(self, user_id: int, provider: str) -> int:
        """Remove every identity ``user_id`` holds with ``provider``."""
        result = self.db.execute(
            delete(OAuthIdentity).where(
                OAuthIdentity.user_id == user_id,
                OAuthIdentity.provider == provider,
            )
        )
        logger.info(f"Removed {result.rowcount} {provider} identities for user {user_id}")
        return result.rowcount
