from __future__ import annotations

from typing import Any, Dict

from twenty48.components.direction import Direction
from twenty48.constants import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_Q,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
)
from twenty48.events.bus import (
    EVENT_KEY_PRESS_RAW,
    EVENT_MOVE_REQUEST,
    EVENT_QUIT_REQUEST,
    EventBus,
)
from twenty48.utils.input_throttle import KeyThrottle

# Numeric key codes instead of arcade.key so input mapping stays importable without a window.
KEY_DIRECTIONS: Dict[int, Direction] = {
    KEY_UP: Direction.UP,
    KEY_W: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_S: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_A: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_D: Direction.RIGHT,
}
QUIT_KEYS = frozenset({KEY_ESCAPE, KEY_Q})


class InputSystem:
    """Translates raw key presses into move and quit requests."""

    def __init__(
        self,
        event_bus: EventBus,
        *,
        throttle: KeyThrottle | None = None,
    ) -> None:
        self.event_bus = event_bus
        self._throttle = throttle or KeyThrottle()
        self.event_bus.subscribe(EVENT_KEY_PRESS_RAW, self._on_key_press_raw)

    def _on_key_press_raw(self, sender: Any, **payload: Any) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        try:
            symbol_int = int(symbol)
        except (TypeError, ValueError):
            return
        self.handle_key_press(symbol_int, payload.get("modifiers", 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        if symbol in QUIT_KEYS:
            self.event_bus.emit(EVENT_QUIT_REQUEST)
            return
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is None:
            return
        if not self._throttle.allow(symbol):
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
