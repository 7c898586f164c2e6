import logging
import random
from typing import List, Optional

from esper import World

from twenty48.components.audio_cue import AudioCue
from twenty48.components.board import Board, Position
from twenty48.components.direction import Direction
from twenty48.components.game_state import GameMode, GameState
from twenty48.components.score import Score
from twenty48.constants import GRID_SIZE, INITIAL_TILES
from twenty48.events.bus import (
    EVENT_AUDIO_CUE,
    EVENT_BOARD_MOVED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_TILES_SPAWNED,
    EventBus,
)
from twenty48.rendering.text_board import render_board_text
from twenty48.systems.board_ops import MoveOutcome, try_move
from twenty48.systems.spawner import spawn_tile
from twenty48.systems.terminal_state import evaluate
from twenty48.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and runs each turn: move, spawn, terminal check.

    Every step of a turn completes inside ``handle_move`` before the next
    request is looked at, and outcome events are emitted only once the board
    has reached its final state for the turn.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        size: int = GRID_SIZE,
        rng: random.Random | None = None,
        initial_tiles: int = INITIAL_TILES,
    ):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.board_entity = self.world.create_entity(Board(size=size), Score())
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)
        seeded: List[Position] = []
        for _ in range(initial_tiles):
            seeded.extend(spawn_tile(self.board, self.score, self._rng))
        if seeded:
            self.event_bus.emit(EVENT_TILES_SPAWNED, positions=seeded)
        logger.debug("Seeded board:\n%s", render_board_text(self.board, seeded))

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def score(self) -> Score:
        return self.world.component_for_entity(self.board_entity, Score)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction is None:
            return
        try:
            direction = Direction(direction)
        except ValueError:
            return
        self.handle_move(direction)

    def handle_move(self, direction: Direction) -> Optional[MoveOutcome]:
        """Run one turn; returns None when the session no longer accepts moves."""
        state = get_game_state(self.world)
        if state is not None and state.mode.terminal:
            return None
        board = self.board
        score = self.score
        outcome = try_move(board, score, direction)
        if not outcome.changed:
            self.event_bus.emit(EVENT_MOVE_REJECTED, direction=direction, reason="no_change")
            self.event_bus.emit(EVENT_AUDIO_CUE, cue=AudioCue.ILLEGAL_MOVE)
            return outcome

        if state is not None:
            state.moves += 1
        spawned = spawn_tile(board, score, self._rng)
        logger.debug(
            "Moved %s (delta=%d, score=%d):\n%s",
            direction.value,
            outcome.score_delta,
            score.value,
            render_board_text(board, spawned),
        )
        self.event_bus.emit(
            EVENT_BOARD_MOVED,
            direction=direction,
            merged=outcome.merged,
            score_delta=outcome.score_delta,
            score=score.value,
            max_tile=score.max_tile,
        )
        if spawned:
            self.event_bus.emit(EVENT_TILES_SPAWNED, positions=spawned)

        mode = self._evaluate(state)
        if mode == GameMode.WON:
            cue = AudioCue.WIN
        elif mode == GameMode.LOST:
            cue = AudioCue.LOSE
        elif outcome.merged:
            cue = AudioCue.MOVE_WITH_MERGE
        else:
            cue = AudioCue.MOVE_NO_MERGE
        self.event_bus.emit(EVENT_AUDIO_CUE, cue=cue)
        if mode.terminal:
            set_game_mode(self.world, self.event_bus, mode)
        return outcome

    def _evaluate(self, state: GameState | None) -> GameMode:
        if state is None:
            return GameMode.PLAYING
        return evaluate(self.board, self.score, state.target)
