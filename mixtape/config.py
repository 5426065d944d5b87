import os

from dotenv import load_dotenv

load_dotenv()

# Public app URL (used for share links and the OAuth redirect)
APP_URL = os.getenv("APP_URL", "http://127.0.0.1:8888").rstrip("/")

# API server
API_HOST = os.getenv("MIXTAPE_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("MIXTAPE_API_PORT", "8888"))

# Spotify OAuth (PKCE, public client: no secret)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "")
SPOTIFY_REDIRECT_URI = os.getenv("SPOTIFY_REDIRECT_URI", f"{APP_URL}/callback")

# Spotify API constants
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_EMBED_BASE = os.getenv(
    "SPOTIFY_EMBED_BASE", "https://open.spotify.com/embed"
).rstrip("/")

SCOPES = [
    "playlist-read-private",
    "playlist-read-collaborative",
]

# Embed page fetch. Spotify rejects requests without a plausible browser identity.
EMBED_USER_AGENT = os.getenv(
    "EMBED_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)
EMBED_REQUEST_TIMEOUT = float(os.getenv("EMBED_REQUEST_TIMEOUT", "15"))
IMPORT_TRANSIENT_RETRIES = int(os.getenv("IMPORT_TRANSIENT_RETRIES", "1"))

# Mixtape links
DESCRIPTION_MAX_LENGTH = int(os.getenv("DESCRIPTION_MAX_LENGTH", "100"))

# Playback
TRANSITION_DELAY_SECONDS = float(os.getenv("TRANSITION_DELAY_SECONDS", "1.2"))
COMPLETION_TOLERANCE_MS = int(os.getenv("COMPLETION_TOLERANCE_MS", "1500"))

# CORS (comma-separated origins, "*" for any)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("MIXTAPE_LOG_LEVEL", "INFO").upper()
