"""Exception hierarchy for social-login.

Every error raised by the package derives from ``SocialLoginException`` so a
host application can install a single handler for all of them.

Error codes follow pattern: [CATEGORY][NUMBER]
- OAU: OAuth flow errors (100-199), see ``social_login.services.oauth.exceptions``
- INS: Installer errors (200-299)
- SYS: Configuration/system errors (400-499)
"""

from __future__ import annotations

from typing import Any


class SocialLoginException(Exception):
    """Base exception for all social-login errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with a user-facing message and metadata.

        Args:
            message: User-facing error message
            code: Unique error code (e.g., "OAU101")
            status_code: HTTP status code a web layer should answer with
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# INSTALLER ERRORS (INS200-299)
# ============================================================================

class InstallationError(SocialLoginException):
    """Base class for installer errors."""
    pass


class PublishedFileExistsError(InstallationError):
    """Destination of a published file already exists and --force was not given."""

    def __init__(self, path: str):
        super().__init__(
            message=f"File already exists: {path}",
            code="INS200",
            status_code=409,
            details={"path": path},
        )
        self.path = path


# ============================================================================
# SYSTEM ERRORS (SYS400-499)
# ============================================================================

class ConfigurationError(SocialLoginException):
    """Configuration is invalid or missing."""

    def __init__(self, parameter: str):
        message = f"Configuration error: {parameter} is not configured properly"
        super().__init__(
            message=message,
            code="SYS400",
            status_code=500,
            details={"parameter": parameter},
        )
