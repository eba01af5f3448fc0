"""
Login / session router.

Endpoints:
  GET /auth/{provider}           — Redirect to Google or Facebook login
  GET /auth/{provider}/callback  — Finish login, store profile in the session
  GET /profile                   — Current user (401 without a session)
  GET /logout                    — Drop the session
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from nlp_studio import config
from nlp_studio.api.schemas.auth import LogoutResponse, ProfileResponse
from nlp_studio.api.services import oauth_service

logger = logging.getLogger(__name__)

router = APIRouter()

_STATE_KEY = "oauth_state"
_USER_KEY = "user"


def _provider_or_404(provider_name: str) -> oauth_service.OAuthProvider:
    provider = oauth_service.get_provider(provider_name)
    if provider is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"Unknown login provider: {provider_name}")
    return provider


@router.get("/auth/{provider_name}", summary="Start OAuth login")
async def login(provider_name: str, request: Request):
    provider = _provider_or_404(provider_name)
    state = secrets.token_urlsafe(16)
    request.session[_STATE_KEY] = state
    return RedirectResponse(oauth_service.authorization_url(provider, state), status_code=status.HTTP_302_FOUND)


@router.get("/auth/{provider_name}/callback", summary="OAuth callback")
async def login_callback(
    provider_name: str,
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
):
    """Exchange the code for a profile; any failure goes back to the login page."""
    provider = _provider_or_404(provider_name)
    failure = RedirectResponse(
        f"{config.FRONTEND_URL}/login?error={provider.name}",
        status_code=status.HTTP_302_FOUND,
    )

    expected_state = request.session.pop(_STATE_KEY, None)
    if error or not code or not state or state != expected_state:
        logger.warning("[%s OAuth] Callback rejected (error=%s, state ok=%s)",
                       provider.name, error, state is not None and state == expected_state)
        return failure

    try:
        profile = await oauth_service.fetch_profile(provider, code)
    except oauth_service.OAuthError as exc:
        logger.warning("[%s OAuth] Login failed: %s", provider.name, exc)
        return failure

    request.session[_USER_KEY] = profile
    return RedirectResponse(f"{config.FRONTEND_URL}/dashboard", status_code=status.HTTP_302_FOUND)


@router.get("/profile", response_model=ProfileResponse, summary="Current user profile")
async def profile(request: Request):
    user = request.session.get(_USER_KEY)
    if not user:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Not authenticated")
    return ProfileResponse(**user)


@router.get("/logout", response_model=LogoutResponse, summary="Log out")
async def logout(request: Request):
    request.session.clear()
    return LogoutResponse()
