"""Public façade for the mixtape.playback package.

Playback-time pipeline: a decoded mixtape drives an external single-track
player through PlaybackController, fed by PlaybackSession's event queue.
"""

from .controller import (
    PlaybackController,
    PlaybackPhase,
    PlaybackState,
    PlaybackStatus,
)
from .events import (
    Navigate,
    Next,
    PlaybackEvent,
    PlayerReady,
    Previous,
    Restart,
    Start,
    StatusUpdate,
    TogglePlay,
    TransitionElapsed,
)
from .player import PlayerHandle
from .session import PlaybackSession

__all__ = [
    "PlaybackController",
    "PlaybackPhase",
    "PlaybackState",
    "PlaybackStatus",
    "PlaybackSession",
    "PlayerHandle",
    "PlaybackEvent",
    "Start",
    "Restart",
    "Navigate",
    "Next",
    "Previous",
    "TogglePlay",
    "PlayerReady",
    "StatusUpdate",
    "TransitionElapsed",
]
