import random

from esper import World
from .events.bus import EventBus
from twenty48.components.game_state import GameMode, GameState
from twenty48.constants import WINNING_VALUE


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    target: int = WINNING_VALUE,
    rng: random.Random | None = None,
) -> World:
    world = World()
    # Shared rng for every system that draws randomness; seed it for reproducible sessions.
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode, target=target))
    return world
