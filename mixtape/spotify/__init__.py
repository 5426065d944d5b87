"""Public façade for the mixtape.spotify package.

This module exposes the Spotify integration: playlist id parsing, embed page
fetching, entity extraction and the OAuth PKCE helpers. Callers should import
these symbols from this façade instead of the internal modules.
"""

from .auth import (
    SpotifyAuthError,
    SpotifySession,
    SpotifyTokenMissing,
    build_spotify_auth_url,
    exchange_code_for_token,
    generate_code_challenge,
    generate_code_verifier,
    refresh_access_token,
)
from .client import EmbedPageFetcher
from .embed import ExtractionResult, extract_playlist, parse_candidate
from .ids import extract_playlist_id, id_from_uri, track_uri

__all__ = [
    "extract_playlist_id",
    "id_from_uri",
    "track_uri",
    "EmbedPageFetcher",
    "ExtractionResult",
    "extract_playlist",
    "parse_candidate",
    "generate_code_verifier",
    "generate_code_challenge",
    "build_spotify_auth_url",
    "exchange_code_for_token",
    "refresh_access_token",
    "SpotifySession",
    "SpotifyAuthError",
    "SpotifyTokenMissing",
]
