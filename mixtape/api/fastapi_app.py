from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mixtape.api.auth.routes import router as auth_router
from mixtape.api.health import router as health_router
from mixtape.api.mixtapes.routes import router as mixtapes_router
from mixtape.api.playlists.routes import router as playlists_router
from mixtape.config import CORS_ORIGINS, LOG_LEVEL
from mixtape.core import configure_logging

configure_logging(LOG_LEVEL)

app = FastAPI(
    title="Mixtape API",
    version="0.1.0",
    description="Turn public Spotify playlists into self-contained share links.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["health"])

# Creation side: import a playlist, then encode it
app.include_router(playlists_router, tags=["playlists"])
app.include_router(mixtapes_router, tags=["mixtapes"])

# OAuth collaborator
app.include_router(auth_router, prefix="/auth", tags=["auth"])
