"""Resolves provider user details to a host-application user."""
import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from social_login.models.oauth_identity import OAuthIdentity
from social_login.models.schemas import ProviderUserDetails

from .exceptions import IdentityStorageError, UserInfoRequestError
from .identity_store import IdentityStore

logger = logging.getLogger(__name__)

LoginCallback = Callable[[Any, ProviderUserDetails], None]


class Authenticator:
    """
    Find or create the user behind a provider account.

    The user model is the host's SQLAlchemy model; it must have an integer
    ``id`` primary key and be constructible without arguments. Host-specific
    columns are filled in by the login callback.
    """

    def __init__(self, db: Session, user_model: type, identities: IdentityStore | None = None):
        self.db = db
        self.user_model = user_model
        self.identities = identities or IdentityStore(db)

    def login(
        self,
        provider: str,
        details: ProviderUserDetails,
        callback: LoginCallback | None = None,
    ) -> Any:
        """
        Resolve ``details`` to a user, run ``callback`` and persist both.

        Args:
            provider: Provider name
            details: Normalized details from the completed flow
            callback: Called with ``(user, details)`` before the user is saved

        Returns:
            The saved user instance
        """
        if details.user_id is None:
            raise UserInfoRequestError("provider returned no user id")

        identity = self.identities.get_by_provider(provider, details.user_id)
        user = self._get_user(identity)

        if callback is not None:
            callback(user, details)

        try:
            self.db.add(user)
            self.db.flush()
            self._store_identity(user, identity, provider, details)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save {provider} login for provider user {details.user_id}: {e}")
            raise IdentityStorageError(provider, conflict=isinstance(e, IntegrityError)) from e
        self.db.refresh(user)

        logger.info(f"User {user.id} authenticated via {provider}")
        return user

    def _get_user(self, identity: OAuthIdentity | None) -> Any:
        if identity is not None:
            user = self.db.get(self.user_model, identity.user_id)
            if user is not None:
                return user
            logger.warning(f"Identity {identity.id} points at missing user {identity.user_id}; creating a new user")
        return self.user_model()

    def _store_identity(
        self,
        user: Any,
        identity: OAuthIdentity | None,
        provider: str,
        details: ProviderUserDetails,
    ) -> None:
        if identity is None:
            identity = OAuthIdentity(
                user_id=user.id,
                provider=provider,
                provider_user_id=details.user_id,
                access_token=details.access_token,
            )
            logger.info(f"Linked new {provider} identity to user {user.id}")
        else:
            identity.user_id = user.id
            identity.access_token = details.access_token
        self.identities.store(identity)
