import asyncio
import logging
from typing import Callable, Optional

from mixtape.config import TRANSITION_DELAY_SECONDS
from mixtape.core import EncodedMixtape

from .controller import PlaybackController, PlaybackStatus
from .events import PlaybackEvent, TransitionElapsed
from .player import PlayerHandle

logger = logging.getLogger(__name__)

_CLOSE = object()


class PlaybackSession:
    """
    Asyncio driver for one listening session.

    Events from the listener and from the player go through a single queue
    and are applied one at a time, so transitions never interleave. The
    loading window is a `loop.call_later` timer that posts TransitionElapsed
    back onto the same queue.
    """

    def __init__(
        self,
        mixtape: EncodedMixtape,
        player: Optional[PlayerHandle] = None,
        *,
        transition_delay: float = TRANSITION_DELAY_SECONDS,
        on_status: Optional[Callable[[PlaybackStatus], None]] = None,
        **controller_kwargs,
    ) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._timer: Optional[asyncio.TimerHandle] = None
        self._on_status = on_status
        self._closed = False
        self._running = False
        self._controller = PlaybackController.from_mixtape(
            mixtape,
            player,
            schedule=self._schedule,
            transition_delay=transition_delay,
            **controller_kwargs,
        )
        self._status = self._controller.status

    @property
    def controller(self) -> PlaybackController:
        return self._controller

    @property
    def status(self) -> PlaybackStatus:
        return self._status

    def post(self, event: PlaybackEvent) -> None:
        """Queue an event (safe to call from player callbacks)."""
        if self._closed:
            return
        self._queue.put_nowait(event)

    def close(self) -> None:
        """
        End the session.

        A running loop stops after the events already queued. When run() is not
        active, the timer and the player handle are released right away.
        """
        if self._closed:
            return
        self._closed = True
        if self._running:
            self._queue.put_nowait(_CLOSE)
        else:
            self._release()

    async def run(self) -> None:
        """Consume events until close() is called."""
        if self._closed:
            self._release()
            return
        self._running = True
        try:
            while True:
                event = await self._queue.get()
                if event is _CLOSE:
                    break
                self._status = self._controller.dispatch(event)
                if self._on_status is not None:
                    self._on_status(self._status)
        finally:
            self._running = False
            self._release()

    def _release(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._controller.close()
        logger.debug("Playback session closed")

    def _schedule(self, delay: float, event: TransitionElapsed) -> None:
        # Only the latest loading window matters
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(delay, self.post, event)
