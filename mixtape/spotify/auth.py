"""Spotify OAuth (authorization code + PKCE) as a thin collaborator.

Tokens are never stored server-side. The caller holds a SpotifySession and
passes it wherever an authenticated call is needed.
"""

import base64
import hashlib
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from urllib.parse import urlencode

import requests

from mixtape.config import (
    SCOPES,
    SPOTIFY_AUTH_URL,
    SPOTIFY_CLIENT_ID,
    SPOTIFY_REDIRECT_URI,
    SPOTIFY_TOKEN_URL,
)

TOKEN_REQUEST_TIMEOUT = 15


class SpotifyAuthError(RuntimeError):
    """Token endpoint refused or could not be reached."""


class SpotifyTokenMissing(SpotifyAuthError):
    """No usable token in the session (never logged in, or logged out)."""


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def generate_code_verifier(num_bytes: int = 64) -> str:
    return _b64url(secrets.token_bytes(num_bytes))


def generate_code_challenge(code_verifier: str) -> str:
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return _b64url(digest)


def build_spotify_auth_url(code_challenge: str, state: Optional[str] = None) -> str:
    params = {
        "client_id": SPOTIFY_CLIENT_ID,
        "response_type": "code",
        "redirect_uri": SPOTIFY_REDIRECT_URI,
        "code_challenge_method": "S256",
        "code_challenge": code_challenge,
        "scope": " ".join(SCOPES),
    }
    if state:
        params["state"] = state
    return f"{SPOTIFY_AUTH_URL}?{urlencode(params)}"


def _post_token(data: Dict[str, str], failure: str) -> Dict:
    try:
        r = requests.post(SPOTIFY_TOKEN_URL, data=data, timeout=TOKEN_REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise SpotifyAuthError(f"{failure}: {e}") from e
    if not r.ok:
        raise SpotifyAuthError(f"{failure}: {r.text}")
    try:
        token_info = r.json()
    except ValueError as e:
        raise SpotifyAuthError(f"{failure}: response is not JSON") from e
    if not isinstance(token_info, dict) or not token_info.get("access_token"):
        raise SpotifyAuthError(f"{failure}: no access token in response")
    token_info["timestamp"] = int(time.time())
    return token_info


def exchange_code_for_token(code: str, code_verifier: str) -> Dict:
    return _post_token(
        {
            "client_id": SPOTIFY_CLIENT_ID,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": SPOTIFY_REDIRECT_URI,
            "code_verifier": code_verifier,
        },
        failure="Token exchange failed",
    )


def refresh_access_token(refresh_token: str) -> Dict:
    return _post_token(
        {
            "client_id": SPOTIFY_CLIENT_ID,
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        },
        failure="Token refresh failed",
    )


@dataclass
class SpotifySession:
    """
    Explicit authentication context.

    Lifecycle: acquire at login (from_token_response), refresh before expiry
    (ensure_fresh), clear on logout.
    """

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: float = 0.0

    @classmethod
    def from_token_response(
        cls, token_info: Dict, now: Optional[float] = None
    ) -> "SpotifySession":
        session = cls()
        session.update(token_info, now=now)
        return session

    def update(self, token_info: Dict, now: Optional[float] = None) -> None:
        access_token = token_info.get("access_token")
        if not access_token:
            raise SpotifyAuthError("Token response has no access token")
        now = time.time() if now is None else now
        self.access_token = access_token
        # Refresh responses may omit the refresh token: keep the one we have
        self.refresh_token = token_info.get("refresh_token") or self.refresh_token
        self.expires_at = now + int(token_info.get("expires_in", 3600))

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def is_expired(self, margin: float = 60, now: Optional[float] = None) -> bool:
        now = time.time() if now is None else now
        return now >= self.expires_at - margin

    def refresh(self, refresher: Callable[[str], Dict] = refresh_access_token) -> None:
        if not self.refresh_token:
            raise SpotifyTokenMissing("No refresh token available. Log in again.")
        self.update(refresher(self.refresh_token))

    def ensure_fresh(
        self,
        refresher: Callable[[str], Dict] = refresh_access_token,
        margin: float = 60,
    ) -> str:
        """Return a valid access token, refreshing it first when it is about to expire."""
        if not self.is_authenticated and not self.refresh_token:
            raise SpotifyTokenMissing("Spotify authorization required.")
        if not self.is_authenticated or self.is_expired(margin=margin):
            self.refresh(refresher)
        return self.access_token

    def clear(self) -> None:
        self.access_token = None
        self.refresh_token = None
        self.expires_at = 0.0

    def headers(self) -> Dict[str, str]:
        if not self.access_token:
            raise SpotifyTokenMissing("Spotify authorization required.")
        return {"Authorization": f"Bearer {self.access_token}"}

    def to_payload(self) -> Dict:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_in": max(0, int(self.expires_at - time.time())),
            "expires_at": int(self.expires_at),
        }
