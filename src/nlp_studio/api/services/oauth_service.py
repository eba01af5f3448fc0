"""
OAuth login service (Google, Facebook).

Authorization-code flow over httpx: build the provider redirect, exchange the
code for an access token, fetch the profile and normalise it to
``{id, displayName, email, photo}``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from nlp_studio import config
from nlp_studio.errors import NLPStudioError

logger = logging.getLogger(__name__)

_TIMEOUT = 15  # seconds per provider request


class OAuthError(NLPStudioError):
    """Login with the identity provider failed."""


@dataclass(frozen=True)
class OAuthProvider:
    name: str
    client_id: str
    client_secret: str
    callback_url: str
    authorize_url: str
    token_url: str
    profile_url: str
    scope: str

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)


def get_provider(name: str) -> Optional[OAuthProvider]:
    """Provider settings from config, or None for an unknown name."""
    if name == "google":
        return OAuthProvider(
            name="google",
            client_id=config.GOOGLE_CLIENT_ID,
            client_secret=config.GOOGLE_CLIENT_SECRET,
            callback_url=config.GOOGLE_CALLBACK_URL,
            authorize_url="https://accounts.google.com/o/oauth2/v2/auth",
            token_url="https://oauth2.googleapis.com/token",
            profile_url="https://www.googleapis.com/oauth2/v3/userinfo",
            scope="openid profile email",
        )
    if name == "facebook":
        return OAuthProvider(
            name="facebook",
            client_id=config.FACEBOOK_CLIENT_ID,
            client_secret=config.FACEBOOK_CLIENT_SECRET,
            callback_url=config.FACEBOOK_CALLBACK_URL,
            authorize_url="https://www.facebook.com/v19.0/dialog/oauth",
            token_url="https://graph.facebook.com/v19.0/oauth/access_token",
            profile_url="https://graph.facebook.com/me",
            scope="email,public_profile",
        )
    return None


def authorization_url(provider: OAuthProvider, state: str) -> str:
    params = {
        "client_id": provider.client_id,
        "redirect_uri": provider.callback_url,
        "response_type": "code",
        "scope": provider.scope,
        "state": state,
    }
    return str(httpx.URL(provider.authorize_url, params=params))


def normalize_profile(provider_name: str, data: dict[str, Any]) -> dict[str, Any]:
    """Map provider-specific profile payloads onto the session profile shape."""
    if provider_name == "google":
        return {
            "id": str(data.get("sub") or data.get("id") or ""),
            "displayName": data.get("name"),
            "email": data.get("email"),
            "photo": data.get("picture"),
        }

    picture = data.get("picture") or {}
    return {
        "id": str(data.get("id") or ""),
        "displayName": data.get("name"),
        "email": data.get("email"),
        "photo": (picture.get("data") or {}).get("url"),
    }


def _json_body(provider: OAuthProvider, response: httpx.Response, what: str) -> dict[str, Any]:
    """Decode a provider reply; anything but a JSON object is a login failure."""
    try:
        body = response.json()
    except ValueError as e:
        logger.error("[%s OAuth] Non-JSON %s reply: %s", provider.name, what, response.text[:200])
        raise OAuthError(f"{provider.name} {what} reply is not JSON") from e

    if not isinstance(body, dict):
        raise OAuthError(f"{provider.name} {what} reply is not a JSON object")
    return body


async def _exchange_code(client: httpx.AsyncClient, provider: OAuthProvider, code: str) -> str:
    params = {
        "client_id": provider.client_id,
        "client_secret": provider.client_secret,
        "redirect_uri": provider.callback_url,
        "code": code,
    }
    if provider.name == "google":
        response = await client.post(provider.token_url, data={**params, "grant_type": "authorization_code"})
    else:
        response = await client.get(provider.token_url, params=params)

    if response.status_code != 200:
        logger.error("[%s OAuth] Token error: %s", provider.name, response.text)
        raise OAuthError(f"{provider.name} token exchange failed ({response.status_code})")

    access_token = _json_body(provider, response, "token").get("access_token")
    if not access_token:
        raise OAuthError(f"{provider.name} returned no access token")
    return access_token


async def _fetch_raw_profile(client: httpx.AsyncClient, provider: OAuthProvider, access_token: str) -> dict:
    if provider.name == "google":
        response = await client.get(
            provider.profile_url,
            headers={"Authorization": f"Bearer {access_token}"},
        )
    else:
        response = await client.get(
            provider.profile_url,
            params={"fields": "id,name,email,picture", "access_token": access_token},
        )

    if response.status_code != 200:
        logger.error("[%s OAuth] Profile error: %s", provider.name, response.text)
        raise OAuthError(f"{provider.name} profile request failed ({response.status_code})")
    return _json_body(provider, response, "profile")


async def fetch_profile(provider: OAuthProvider, code: str) -> dict[str, Any]:
    """
    Complete the authorization-code flow.

    Raises:
        OAuthError: provider not configured, or any provider/transport failure
    """
    if not provider.configured:
        raise OAuthError(f"{provider.name} OAuth not configured")

    try:
        async with httpx.AsyncClient(timeout=_TIMEOUT) as client:
            access_token = await _exchange_code(client, provider, code)
            data = await _fetch_raw_profile(client, provider, access_token)
    except httpx.HTTPError as e:
        logger.error("[%s OAuth] HTTP Error: %s", provider.name, e)
        raise OAuthError(str(e)) from e

    profile = normalize_profile(provider.name, data)
    if not profile["id"]:
        raise OAuthError(f"{provider.name} profile has no id")
    logger.info("[%s OAuth] Success - user %s", provider.name, profile["id"])
    return profile
