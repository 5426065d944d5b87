from typing import Dict, List
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from mixtape.spotify import (
    SpotifyAuthError,
    SpotifySession,
    SpotifyTokenMissing,
    build_spotify_auth_url,
    exchange_code_for_token,
    generate_code_challenge,
    generate_code_verifier,
)


def test_code_verifier_and_challenge() -> None:
    verifier = generate_code_verifier()
    assert len(verifier) == 86
    assert "=" not in verifier
    assert verifier != generate_code_verifier()

    # RFC 7636 appendix B test vector
    assert (
        generate_code_challenge("dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk")
        == "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"
    )


def test_auth_url_parameters(monkeypatch) -> None:
    monkeypatch.setattr("mixtape.spotify.auth.SPOTIFY_CLIENT_ID", "client-123")
    monkeypatch.setattr("mixtape.spotify.auth.SPOTIFY_REDIRECT_URI", "http://app.test/callback")

    url = build_spotify_auth_url("challenge", state="xyz")
    query = parse_qs(urlparse(url).query)

    assert url.startswith("https://accounts.spotify.com/authorize?")
    assert query["client_id"] == ["client-123"]
    assert query["redirect_uri"] == ["http://app.test/callback"]
    assert query["code_challenge_method"] == ["S256"]
    assert query["code_challenge"] == ["challenge"]
    assert query["scope"] == ["playlist-read-private playlist-read-collaborative"]
    assert query["state"] == ["xyz"]


class FakeTokenResponse:
    def __init__(self, ok: bool, payload: Dict, text: str = "") -> None:
        self.ok = ok
        self._payload = payload
        self.text = text

    def json(self) -> Dict:
        return self._payload


def test_exchange_code_posts_pkce_fields(monkeypatch) -> None:
    calls: List[Dict] = []

    def fake_post(url, data, timeout):
        calls.append({"url": url, "data": data})
        return FakeTokenResponse(True, {"access_token": "acc", "refresh_token": "ref", "expires_in": 3600})

    monkeypatch.setattr("mixtape.spotify.auth.requests.post", fake_post)

    token_info = exchange_code_for_token("the-code", "the-verifier")

    assert token_info["access_token"] == "acc"
    assert "timestamp" in token_info
    data = calls[0]["data"]
    assert data["grant_type"] == "authorization_code"
    assert data["code"] == "the-code"
    assert data["code_verifier"] == "the-verifier"


def test_exchange_code_failure(monkeypatch) -> None:
    monkeypatch.setattr(
        "mixtape.spotify.auth.requests.post",
        lambda url, data, timeout: FakeTokenResponse(False, {}, text="invalid_grant"),
    )
    with pytest.raises(SpotifyAuthError):
        exchange_code_for_token("bad", "verifier")


def test_exchange_code_network_error(monkeypatch) -> None:
    def boom(url, data, timeout):
        raise requests.ConnectionError("down")

    monkeypatch.setattr("mixtape.spotify.auth.requests.post", boom)
    with pytest.raises(SpotifyAuthError):
        exchange_code_for_token("code", "verifier")


def test_session_from_token_response() -> None:
    session = SpotifySession.from_token_response(
        {"access_token": "acc", "refresh_token": "ref", "expires_in": 3600}, now=1000
    )

    assert session.is_authenticated
    assert session.expires_at == 4600
    assert not session.is_expired(now=2000)
    assert session.is_expired(now=4550)
    assert session.headers() == {"Authorization": "Bearer acc"}


def test_ensure_fresh_refreshes_and_keeps_refresh_token() -> None:
    session = SpotifySession(access_token="old", refresh_token="ref", expires_at=0)
    seen: List[str] = []

    def refresher(refresh_token: str) -> Dict:
        seen.append(refresh_token)
        return {"access_token": "new", "expires_in": 3600}

    assert session.ensure_fresh(refresher) == "new"
    assert seen == ["ref"]
    assert session.refresh_token == "ref"
    assert not session.is_expired()


def test_ensure_fresh_skips_refresh_when_valid() -> None:
    session = SpotifySession.from_token_response({"access_token": "acc", "refresh_token": "ref"})

    def refresher(refresh_token: str) -> Dict:
        raise AssertionError("should not refresh")

    assert session.ensure_fresh(refresher) == "acc"


def test_clear_logs_out() -> None:
    session = SpotifySession(access_token="acc", refresh_token="ref", expires_at=10)
    session.clear()

    assert not session.is_authenticated
    with pytest.raises(SpotifyTokenMissing):
        session.headers()
    with pytest.raises(SpotifyTokenMissing):
        session.ensure_fresh(lambda token: {})


def test_exchange_code_non_json_body(monkeypatch) -> None:
    class NotJson(FakeTokenResponse):
        def json(self) -> Dict:
            raise ValueError("Expecting value")

    monkeypatch.setattr(
        "mixtape.spotify.auth.requests.post",
        lambda url, data, timeout: NotJson(True, {}, text="<html>maintenance</html>"),
    )
    with pytest.raises(SpotifyAuthError):
        exchange_code_for_token("code", "verifier")


def test_exchange_code_missing_access_token(monkeypatch) -> None:
    monkeypatch.setattr(
        "mixtape.spotify.auth.requests.post",
        lambda url, data, timeout: FakeTokenResponse(True, {"token_type": "Bearer"}),
    )
    with pytest.raises(SpotifyAuthError):
        exchange_code_for_token("code", "verifier")


def test_session_update_requires_access_token() -> None:
    session = SpotifySession(refresh_token="ref")
    with pytest.raises(SpotifyAuthError):
        session.refresh(lambda refresh_token: {"expires_in": 3600})
    assert session.refresh_token == "ref"
