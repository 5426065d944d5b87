#!/usr/bin/env python3
"""
Smoke test for a running mixtape API.

It runs through:
- /health
- playlist import (GET /playlist/{ref})
- link creation (POST /mixtape) and decoding (GET /mixtape/{token})
- a tampered token, which must come back as an invalid link

Run with:
    python scripts/smoke_test.py [playlist url or id]
"""

import json
import sys
from typing import Any, Dict
from urllib.parse import quote

import requests

BASE_URL = "http://localhost:8888"

# A public editorial playlist
DEFAULT_PLAYLIST = "https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M"


def call(method: str, path: str, expect: int = 200, **kwargs) -> Dict[str, Any]:
    url = f"{BASE_URL}{path}"
    print(f"\n=== {method.upper()} {path[:80]} ===")
    try:
        resp = requests.request(method, url, timeout=30, **kwargs)
    except requests.RequestException as e:
        print(f"❌ Request failed: {e}")
        sys.exit(1)

    print(f"Status: {resp.status_code}")
    if resp.status_code != expect:
        print(f"❌ Expected {expect}:")
        print(resp.text)
        sys.exit(1)

    data = resp.json()
    print(json.dumps(data, indent=2, ensure_ascii=False)[:400])
    return data


def main() -> None:
    playlist_ref = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_PLAYLIST

    call("get", "/health")

    preview = call("get", f"/playlist/{quote(playlist_ref, safe='')}")
    print(f"✅ Imported '{preview['name']}' ({len(preview['tracks'])} tracks)")

    link = call("post", "/mixtape", json=preview)
    print(f"✅ Share link: {link['url']}")

    opened = call("get", f"/mixtape/{link['token']}")
    expected_ids = [t["id"] for t in preview["tracks"]]
    if opened["track_ids"] != expected_ids:
        print("❌ Decoded track order differs from the preview")
        sys.exit(1)
    print("✅ Link decodes to the same tracks, same order")

    call("get", f"/mixtape/{link['token'][:-3]}!!", expect=400)
    print("✅ Tampered link rejected")

    print("\n🎉 Smoke test passed")


if __name__ == "__main__":
    main()
