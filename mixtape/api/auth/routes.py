import logging
from typing import Optional

from fastapi import APIRouter, Query

from mixtape.config import SPOTIFY_CLIENT_ID
from mixtape.spotify import (
    SpotifyAuthError,
    SpotifySession,
    build_spotify_auth_url,
    exchange_code_for_token,
    generate_code_challenge,
    generate_code_verifier,
    refresh_access_token,
)

from ..errors import ErrorResponse, error_response
from .schemas import AuthUrlResponse, RefreshRequest, TokenPayload, TokenRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/url",
    response_model=AuthUrlResponse,
    responses={503: {"model": ErrorResponse}},
)
def get_auth_url(state: Optional[str] = Query(default=None)):
    """
    Fresh PKCE pair plus the Spotify authorize URL.

    The client keeps `code_verifier` until the redirect comes back; the
    server does not remember it.
    """
    if not SPOTIFY_CLIENT_ID:
        return error_response(503, "SPOTIFY_CLIENT_ID not set")
    verifier = generate_code_verifier()
    return AuthUrlResponse(
        auth_url=build_spotify_auth_url(generate_code_challenge(verifier), state=state),
        code_verifier=verifier,
        state=state,
    )


@router.post(
    "/token",
    response_model=TokenPayload,
    responses={502: {"model": ErrorResponse}},
)
def exchange_token(body: TokenRequest):
    try:
        token_info = exchange_code_for_token(body.code, body.code_verifier)
    except SpotifyAuthError as e:
        logger.warning("%s", e)
        return error_response(502, "Token exchange failed")
    return SpotifySession.from_token_response(token_info).to_payload()


@router.post(
    "/refresh",
    response_model=TokenPayload,
    responses={502: {"model": ErrorResponse}},
)
def refresh_token(body: RefreshRequest):
    """Refresh an access token. The old refresh token is echoed back when Spotify omits it."""
    session = SpotifySession(refresh_token=body.refresh_token)
    try:
        session.refresh(refresh_access_token)
    except SpotifyAuthError as e:
        logger.warning("%s", e)
        return error_response(502, "Token refresh failed")
    return session.to_payload()
