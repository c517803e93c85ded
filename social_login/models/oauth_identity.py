"""
OAuth identity model.

Links a host-application user to the account that user holds with a
provider. One row per (provider, provider_user_id); a user may hold several
identities, one per provider.

The table layout matches the migration shipped in
``social_login/stubs/create_oauth_identities_table.py.stub``.
"""

from sqlalchemy import Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import func

from social_login.core.config import settings
from social_login.db.base_class import Base


class OAuthIdentity(Base):
    """
    A provider account linked to a user.

    Attributes:
        id: Primary key
        user_id: Primary key of the host user model
        provider: Provider name (e.g., "github")
        provider_user_id: User id as reported by the provider
        access_token: Token obtained on the most recent login
        created_at: When the identity was first linked
        updated_at: When the access token was last refreshed by a login
    """

    __tablename__ = settings.IDENTITY_TABLE

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    provider = Column(String(50), nullable=False)
    provider_user_id = Column(String(255), nullable=False)
    access_token = Column(Text, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )

    __table_args__ = (
        Index(
            "ix_oauth_identities_provider_user",
            "provider",
            "provider_user_id",
            unique=True,
        ),
    )

    def __repr__(self) -> str:
        """String representation (no token)."""
        return (
            f"<OAuthIdentity(id={self.id}, "
            f"user_id={self.user_id}, "
            f"provider={self.provider})>"
        )
