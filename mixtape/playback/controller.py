"""Sequential listening state machine.

States: NOT_STARTED -> LOADING(i) -> PLAYING(i) / PAUSED(i) -> ... -> FINISHED.

The controller is synchronous. Timing lives outside it: entering LOADING asks
the injected `schedule` callable to deliver TransitionElapsed(seq) after a
fixed delay. That window stands in for a readiness signal the player does
not send reliably, so a very slow load can still finish after it closes.
End-of-track reports only count once the loaded track has reported a
position away from its end, so a late report from the previous track cannot
skip the next one.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

from mixtape.config import COMPLETION_TOLERANCE_MS, TRANSITION_DELAY_SECONDS
from mixtape.core import EncodedMixtape
from mixtape.spotify import track_uri

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

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, TransitionElapsed], Any]


class PlaybackPhase(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass
class PlaybackState:
    """
    Mutable session state, owned by one controller.

    - index           : current track, always within [0, track_count)
    - advanced        : one-shot completion guard for the current track
    - armed           : a report away from the track end has been seen since
                        the last load; completion counts only after that
    - transition_seq  : id of the latest loading window
    - player_paused   : last paused flag reported by the player
    """

    phase: PlaybackPhase = PlaybackPhase.NOT_STARTED
    index: int = 0
    advanced: bool = False
    armed: bool = False
    transition_seq: int = 0
    player_paused: bool = True
    position_ms: int = 0
    duration_ms: int = 0

    @property
    def is_transitioning(self) -> bool:
        return self.phase == PlaybackPhase.LOADING

    @property
    def is_finished(self) -> bool:
        return self.phase == PlaybackPhase.FINISHED

    @property
    def is_playing(self) -> bool:
        if self.phase == PlaybackPhase.PLAYING:
            return True
        return self.phase == PlaybackPhase.LOADING and not self.player_paused


@dataclass(frozen=True)
class PlaybackStatus:
    phase: PlaybackPhase
    index: int
    track_number: int
    track_count: int
    track_id: str
    is_playing: bool
    is_transitioning: bool
    is_finished: bool
    can_go_previous: bool
    can_go_next: bool
    position_ms: int
    duration_ms: int


_NAVIGABLE = (PlaybackPhase.PLAYING, PlaybackPhase.PAUSED)


class PlaybackController:
    """
    Drive an external single-track player through a mixtape, strictly in order.

    Listeners can step one track back or forward when nothing is loading;
    the controller also advances on its own when a track completes. At most
    one navigation is in flight at any time: requests made while LOADING,
    and out-of-range targets, are dropped silently.
    """

    def __init__(
        self,
        track_ids: Sequence[str],
        player: Optional[PlayerHandle] = None,
        *,
        schedule: Optional[Scheduler] = None,
        transition_delay: float = TRANSITION_DELAY_SECONDS,
        completion_tolerance_ms: int = COMPLETION_TOLERANCE_MS,
    ) -> None:
        if not track_ids:
            raise ValueError("A mixtape needs at least one track.")
        self._track_ids = tuple(track_ids)
        self._player = player
        self._schedule = schedule
        self._transition_delay = transition_delay
        self._tolerance_ms = completion_tolerance_ms
        self._state = PlaybackState()
        self._handlers: Dict[type, Callable[[Any], None]] = {
            Start: self._on_start,
            Restart: self._on_restart,
            Navigate: self._on_navigate,
            Next: self._on_next,
            Previous: self._on_previous,
            TogglePlay: self._on_toggle_play,
            PlayerReady: self._on_player_ready,
            StatusUpdate: self._on_status_update,
            TransitionElapsed: self._on_transition_elapsed,
        }

    @classmethod
    def from_mixtape(
        cls,
        mixtape: EncodedMixtape,
        player: Optional[PlayerHandle] = None,
        **kwargs: Any,
    ) -> "PlaybackController":
        return cls(mixtape.track_ids, player, **kwargs)

    @property
    def track_count(self) -> int:
        return len(self._track_ids)

    @property
    def player(self) -> Optional[PlayerHandle]:
        return self._player

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def status(self) -> PlaybackStatus:
        s = self._state
        navigable = s.phase in _NAVIGABLE
        return PlaybackStatus(
            phase=s.phase,
            index=s.index,
            track_number=s.index + 1,
            track_count=self.track_count,
            track_id=self._track_ids[s.index],
            is_playing=s.is_playing,
            is_transitioning=s.is_transitioning,
            is_finished=s.is_finished,
            can_go_previous=navigable and s.index > 0,
            can_go_next=navigable and s.index < self.track_count - 1,
            position_ms=s.position_ms,
            duration_ms=s.duration_ms,
        )

    def dispatch(self, event: PlaybackEvent) -> PlaybackStatus:
        """Apply one event and return the resulting status snapshot."""
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.debug("Ignoring unknown playback event %r", event)
        else:
            handler(event)
        return self.status

    def close(self) -> None:
        """End of session: release the player handle."""
        if self._player is not None:
            self._player.destroy()
            self._player = None

    # ---------- event handlers ----------

    def _on_start(self, _event: Start) -> None:
        if self._state.phase != PlaybackPhase.NOT_STARTED:
            return
        logger.info("Starting mixtape (%d tracks)", self.track_count)
        self._begin_transition(0)

    def _on_restart(self, _event: Restart) -> None:
        if self._state.phase != PlaybackPhase.FINISHED:
            return
        logger.info("Restarting mixtape from the first track")
        self._begin_transition(0)

    def _on_navigate(self, event: Navigate) -> None:
        self._navigate(event.target)

    def _on_next(self, _event: Next) -> None:
        self._navigate(self._state.index + 1)

    def _on_previous(self, _event: Previous) -> None:
        self._navigate(self._state.index - 1)

    def _on_toggle_play(self, _event: TogglePlay) -> None:
        if self._state.phase in _NAVIGABLE and self._player is not None:
            self._player.toggle_play()

    def _on_player_ready(self, event: PlayerReady) -> None:
        previous = self._player
        if previous is not None and previous is not event.player:
            previous.destroy()
        self._player = event.player

        phase = self._state.phase
        if phase == PlaybackPhase.LOADING or phase in _NAVIGABLE:
            # Fresh handle: the current track starts over
            self._state.advanced = False
            self._state.armed = False
            self._load_current()

    def _on_status_update(self, event: StatusUpdate) -> None:
        s = self._state
        s.player_paused = event.paused
        s.position_ms = event.position_ms
        s.duration_ms = event.duration_ms
        if not self._is_near_end(event):
            s.armed = True

        if s.phase not in _NAVIGABLE:
            # LOADING: a late report for the previous track must not advance again
            return

        s.phase = PlaybackPhase.PAUSED if event.paused else PlaybackPhase.PLAYING
        if s.advanced or not self._is_complete(event):
            return
        if not s.armed:
            # Still the previous track reporting its end after the window closed
            logger.debug("Ignoring end-of-track report before track %d started", s.index + 1)
            return

        s.advanced = True
        self._advance()

    def _on_transition_elapsed(self, event: TransitionElapsed) -> None:
        s = self._state
        if s.phase != PlaybackPhase.LOADING or event.seq != s.transition_seq:
            logger.debug("Dropping stale transition window %d", event.seq)
            return
        s.phase = PlaybackPhase.PAUSED if s.player_paused else PlaybackPhase.PLAYING
        logger.debug(
            "Loading window closed for track %d/%d (readiness not confirmed by the player)",
            s.index + 1,
            self.track_count,
        )

    # ---------- transitions ----------

    def _is_near_end(self, event: StatusUpdate) -> bool:
        return (
            event.duration_ms > 0
            and event.position_ms >= event.duration_ms - self._tolerance_ms
        )

    def _is_complete(self, event: StatusUpdate) -> bool:
        return event.position_ms > 0 and self._is_near_end(event)

    def _navigate(self, target: int) -> None:
        if self._state.phase not in _NAVIGABLE:
            logger.debug("Navigation to %d ignored in phase %s", target, self._state.phase.value)
            return
        if not 0 <= target < self.track_count:
            logger.debug("Navigation to %d ignored: out of range", target)
            return
        self._begin_transition(target)

    def _advance(self) -> None:
        next_index = self._state.index + 1
        if next_index >= self.track_count:
            self._state.phase = PlaybackPhase.FINISHED
            logger.info("Mixtape finished after %d tracks", self.track_count)
            return
        self._begin_transition(next_index)

    def _begin_transition(self, target: int) -> None:
        s = self._state
        s.index = target
        s.phase = PlaybackPhase.LOADING
        s.advanced = False
        s.armed = False
        s.position_ms = 0
        s.duration_ms = 0
        s.transition_seq += 1

        self._load_current()
        if self._schedule is not None:
            self._schedule(self._transition_delay, TransitionElapsed(s.transition_seq))

    def _load_current(self) -> None:
        if self._player is None:
            logger.debug("No player yet, track %d loads when it is ready", self._state.index + 1)
            return
        self._player.load_uri(track_uri(self._track_ids[self._state.index]))
        self._player.play()
