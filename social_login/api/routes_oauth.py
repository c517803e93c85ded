"""
OAuth 2.0 social login routes.

Endpoints:
- GET  /auth/oauth/providers - List configured providers
- GET  /auth/oauth/{provider}/login - Initiate OAuth flow
- GET  /auth/oauth/{provider}/callback - Handle OAuth callback

The state token lives in the Starlette session, so the host app needs
``SessionMiddleware``; ``include_oauth_routes`` installs both.

Hosts that want users created or updated on login override
``get_oauth_service`` with one built by ``create_oauth_service(db, User)``.
"""

import logging
from collections.abc import Iterator

import httpx
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from social_login.core.config import settings
from social_login.core.exceptions import SocialLoginException
from social_login.models import schemas
from social_login.services.oauth import OAuthService, create_oauth_service, oauth_provider_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth/oauth", tags=["oauth"])


def get_oauth_service() -> Iterator[OAuthService]:
    """Per-request service; the HTTP client is closed when the request ends."""
    with httpx.Client(timeout=settings.HTTP_TIMEOUT) as client:
        yield create_oauth_service(http_client=client)


def _error_response(error: SocialLoginException) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@router.get("/providers", response_model=schemas.OAuthProvidersOut)
def list_oauth_providers(oauth_service: OAuthService = Depends(get_oauth_service)) -> dict:
    """
    List available OAuth providers.

    Returns:
        {"providers": [{"name": "github", "display_name": "GitHub"}]}
    """
    providers = []
    for name in oauth_service.list_providers():
        provider_cls = oauth_provider_registry.get(name)
        providers.append({"name": name, "display_name": provider_cls.display_name})
    return {"providers": providers}


@router.get("/{provider}/login")
def oauth_login(
    provider: str,
    request: Request,
    oauth_service: OAuthService = Depends(get_oauth_service),
):
    """
    Initiate OAuth login flow.

    Redirects user to OAuth provider's authorization page.

    Example:
        GET /auth/oauth/github/login
    """
    try:
        auth_url = oauth_service.authorize(provider, request.session)
    except SocialLoginException as e:
        return _error_response(e)
    return RedirectResponse(url=auth_url)


@router.get("/{provider}/callback", response_model=schemas.OAuthCallbackOut)
def oauth_callback(
    provider: str,
    request: Request,
    oauth_service: OAuthService = Depends(get_oauth_service),
):
    """
    Handle OAuth provider callback.

    Completes OAuth flow:
    1. Validates CSRF state
    2. Exchanges code for an access token
    3. Fetches user info
    4. Resolves the user, when the service has an authenticator

    Example:
        GET /auth/oauth/github/callback?code=abc&state=123
    """
    result = oauth_service.login(provider, request.query_params, request.session)
    if not result.success:
        return _error_response(result.error)

    details = result.details
    return {
        "provider": provider,
        "user_id": getattr(result.user, "id", None),
        "provider_user_id": details.user_id,
        "nickname": details.nickname,
        "email": details.email,
    }


def include_oauth_routes(app: FastAPI) -> None:
    """Mount the OAuth routes and the session middleware they rely on."""
    app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET)
    app.include_router(router)
