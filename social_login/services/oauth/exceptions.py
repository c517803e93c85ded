"""OAuth service exceptions."""
from __future__ import annotations

from social_login.core.exceptions import SocialLoginException


class OAuthProviderError(SocialLoginException):
    """Raised when OAuth provider communication fails."""

    def __init__(self, message: str = "Failed to communicate with OAuth provider", **kwargs):
        kwargs.setdefault("code", "OAU100")
        kwargs.setdefault("status_code", 502)
        super().__init__(message=message, **kwargs)


class ApplicationRejectedError(OAuthProviderError):
    """Callback carried no authorization code: the user cancelled or the provider denied access."""

    def __init__(self):
        super().__init__(
            message="The application was not authorized by the user",
            code="OAU101",
            status_code=401,
        )


class InvalidAuthorizationCodeError(OAuthProviderError):
    """Token endpoint rejected the authorization code or returned no access token."""

    def __init__(self, response_body: str | None = None):
        super().__init__(
            message="The authorization code could not be exchanged for an access token",
            code="OAU102",
            status_code=400,
            details={"response_body": response_body} if response_body is not None else {},
        )
        self.response_body = response_body


class UserInfoRequestError(OAuthProviderError):
    """Raised when fetching user info fails."""

    def __init__(self, reason: str, response_body: str | None = None):
        super().__init__(
            message=f"User info fetch failed: {reason}",
            code="OAU103",
            status_code=502,
            details={"response_body": response_body} if response_body is not None else {},
        )


class InvalidStateError(OAuthProviderError):
    """State returned on callback does not match the one issued at authorize time."""

    def __init__(self):
        super().__init__(
            message="Invalid state token. Possible CSRF attack or expired session.",
            code="OAU104",
            status_code=400,
        )


class ProviderNotRegisteredError(OAuthProviderError):
    """No provider is registered or configured under the requested name."""

    def __init__(self, name: str):
        super().__init__(
            message=f"OAuth provider '{name}' not registered",
            code="OAU105",
            status_code=404,
            details={"provider": name},
        )


class IdentityStorageError(SocialLoginException):
    """The user or identity row could not be saved; the transaction was rolled back."""

    def __init__(self, provider: str, conflict: bool = False):
        super().__init__(
            message=(
                f"The {provider} account is already linked to another user"
                if conflict
                else "The login could not be saved"
            ),
            code="OAU106",
            status_code=409 if conflict else 500,
            details={"provider": provider},
        )
