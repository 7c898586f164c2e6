"""Session lifecycle: decides when the session ends and tells the collaborators."""
from __future__ import annotations

import logging
from typing import Callable

from esper import World

from twenty48.components.score import Score
from twenty48.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_QUIT_REQUEST,
    EVENT_SESSION_END,
    EventBus,
)

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Emits ``EVENT_SESSION_END`` exactly once, on a terminal mode or on quit."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._on_quit = on_quit
        self._ended = False
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self._on_mode_changed)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self._on_quit_request)

    @property
    def ended(self) -> bool:
        return self._ended

    def end_session(self) -> None:
        if self._ended:
            return
        self._ended = True
        score = self._score()
        value = score.value if score else 0
        max_tile = score.max_tile if score else 0
        logger.info("Session over: score=%d max=%d", value, max_tile)
        self.event_bus.emit(EVENT_SESSION_END, score=value, max_tile=max_tile)

    def _on_mode_changed(self, sender, **payload) -> None:
        new_mode = payload.get("new_mode")
        if new_mode is not None and new_mode.terminal:
            self.end_session()

    def _on_quit_request(self, sender, **payload) -> None:
        self.end_session()
        if self._on_quit is not None:
            self._on_quit()

    def _score(self) -> Score | None:
        for _, score in self.world.get_component(Score):
            return score
        return None
