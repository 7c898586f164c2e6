from __future__ import annotations

import random
from typing import Any, Dict, List, Sequence, Tuple

from esper import World

from twenty48.components.board import Board
from twenty48.constants import WINNING_VALUE
from twenty48.events.bus import EventBus
from twenty48.systems.board import BoardSystem
from twenty48.world import create_world


def make_board_system(
    rows: Sequence[Sequence[int]],
    *,
    seed: int = 0,
    target: int = WINNING_VALUE,
    bus: EventBus | None = None,
) -> Tuple[EventBus, World, BoardSystem]:
    """Build a world whose board holds exactly ``rows`` (no seeded tiles)."""

    bus = bus or EventBus()
    world = create_world(bus, target=target, rng=random.Random(seed))
    system = BoardSystem(world, bus, size=len(rows), initial_tiles=0)
    board: Board = system.board
    board.load(rows)
    system.score.max_tile = board.max_value()
    return bus, world, system


def record_events(bus: EventBus, *names: str) -> List[Tuple[str, Dict[str, Any]]]:
    """Subscribe to ``names`` and collect ``(name, payload)`` pairs in emit order."""

    received: List[Tuple[str, Dict[str, Any]]] = []
    for name in names:
        def handler(sender, _name=name, **kwargs):
            received.append((_name, kwargs))
        bus.subscribe(name, handler)
    return received
