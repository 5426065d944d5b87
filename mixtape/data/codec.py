"""Stateless share-link codec.

A mixtape is serialized to compact JSON, base64-encoded, mapped to the
URL-safe alphabet (``+`` -> ``-``, ``/`` -> ``_``) and stripped of ``=``
padding, so the token can sit unescaped in a path segment. Decoding reverses
each step and collapses every failure into ``None``: callers only ever see
"valid mixtape" or "invalid link".
"""

import base64
import json
import logging
import re
from typing import Optional

from pydantic import ValidationError

from mixtape.config import APP_URL
from mixtape.core import EncodedMixtape

logger = logging.getLogger(__name__)

_TO_URL_SAFE = str.maketrans({"+": "-", "/": "_"})
_FROM_URL_SAFE = str.maketrans({"-": "+", "_": "/"})
_TOKEN_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def encode_mixtape(mixtape: EncodedMixtape) -> str:
    """Serialize a mixtape into a URL-safe, padding-free token."""
    payload = mixtape.model_dump(by_alias=True)
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return encoded.translate(_TO_URL_SAFE).rstrip("=")


def _restore_base64(token: str) -> str:
    restored = token.translate(_FROM_URL_SAFE)
    return restored + "=" * (-len(restored) % 4)


def decode_mixtape(token: object) -> Optional[EncodedMixtape]:
    """
    Decode a share token back into a mixtape.

    Returns None for anything that is not a complete, well-typed mixtape:
    wrong alphabet, bad padding, invalid UTF-8, malformed JSON or wrong shape.
    Never raises.
    """
    if not isinstance(token, str):
        return None
    token = token.strip().rstrip("=")
    if not token or not _TOKEN_RE.match(token):
        logger.debug("Rejected mixtape token: invalid character set")
        return None

    try:
        raw = base64.b64decode(_restore_base64(token), validate=True)
        text = raw.decode("utf-8")
        return EncodedMixtape.model_validate_json(text)
    except (ValueError, ValidationError) as e:
        # binascii.Error and UnicodeDecodeError are ValueError subclasses
        logger.debug("Rejected mixtape token: %s", type(e).__name__)
        return None


def build_share_link(token: str, base_url: str = APP_URL) -> str:
    """Public listening URL for a token."""
    return f"{base_url.rstrip('/')}/listen/{token}"
