"""Typed events consumed by the playback state machine."""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from .player import PlayerHandle


@dataclass(frozen=True)
class Start:
    """Listener pressed start."""


@dataclass(frozen=True)
class Restart:
    """Listener asked to play the mixtape again after the end."""


@dataclass(frozen=True)
class Navigate:
    target: int


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Previous:
    pass


@dataclass(frozen=True)
class TogglePlay:
    pass


@dataclass(frozen=True)
class PlayerReady:
    """The player script reported readiness with a fresh handle."""

    player: PlayerHandle


@dataclass(frozen=True)
class StatusUpdate:
    """Periodic status report from the player (times in milliseconds)."""

    paused: bool
    buffering: bool = False
    duration_ms: int = 0
    position_ms: int = 0

    @classmethod
    def from_embed(cls, data: Mapping[str, Any]) -> "StatusUpdate":
        """Map an embed `playback_update` payload (isPaused, isBuffering, duration, position)."""
        return cls(
            paused=bool(data.get("isPaused", True)),
            buffering=bool(data.get("isBuffering", False)),
            duration_ms=int(data.get("duration") or 0),
            position_ms=int(data.get("position") or 0),
        )


@dataclass(frozen=True)
class TransitionElapsed:
    """The fixed loading window for transition `seq` is over."""

    seq: int


PlaybackEvent = Union[
    Start,
    Restart,
    Navigate,
    Next,
    Previous,
    TogglePlay,
    PlayerReady,
    StatusUpdate,
    TransitionElapsed,
]
