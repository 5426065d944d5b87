import re
from typing import Optional

# Same pattern family as the web client: playlist/<id> or playlist:<id>
_PLAYLIST_REF_RE = re.compile(r"playlist[/:]([a-zA-Z0-9]+)")
_BARE_ID_RE = re.compile(r"^[a-zA-Z0-9]{22}$")


def extract_playlist_id(raw: str | None) -> Optional[str]:
    """
    Normalize user input into a bare playlist id.

    Accepts:
      - https://open.spotify.com/playlist/<id>?si=...
      - spotify:playlist:<id>
      - a bare 22-character alphanumeric id
    Returns None for anything else.
    """
    if not raw:
        return None
    match = _PLAYLIST_REF_RE.search(raw)
    if match:
        return match.group(1)
    candidate = raw.strip()
    if _BARE_ID_RE.match(candidate):
        return candidate
    return None


def id_from_uri(uri: str) -> str:
    """Final segment of a provider URI (spotify:track:<id> -> <id>)."""
    return uri.split(":")[-1].strip()


def track_uri(track_id: str) -> str:
    return f"spotify:track:{track_id}"
