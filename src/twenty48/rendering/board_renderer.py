"""Arcade rendering of the board, the score header and the end-of-game banner."""
from __future__ import annotations

from typing import Any, Set, Tuple

from esper import World

from twenty48.components.board import Board, Position
from twenty48.components.game_state import GameMode
from twenty48.components.hiscore import HiScore
from twenty48.components.score import Score
from twenty48.constants import (
    BOARD_BACKGROUND,
    BOARD_BOTTOM_MARGIN,
    DARK_TEXT,
    EMPTY_TILE_COLOR,
    HEADER_HEIGHT,
    LIGHT_TEXT,
    SPAWN_OUTLINE_COLOR,
    SUPER_TILE_COLOR,
    TILE_COLORS,
    TILE_GAP,
    TILE_SIZE,
)
from twenty48.events.bus import EVENT_TILES_SPAWNED, EventBus
from twenty48.utils.game_state import get_game_state

Color = Tuple[int, int, int]


def compute_board_geometry(window_width: int, window_height: int, size: int):
    """Return (tile_size, left, bottom) so the board fits below the header."""
    available_w = window_width - 2 * TILE_GAP
    available_h = window_height - HEADER_HEIGHT - BOARD_BOTTOM_MARGIN
    by_w = (available_w - (size + 1) * TILE_GAP) / size
    by_h = (available_h - (size + 1) * TILE_GAP) / size
    tile_size = int(min(TILE_SIZE, by_w, by_h))
    if tile_size < 20:
        tile_size = 20
    board_extent = size * tile_size + (size + 1) * TILE_GAP
    left = (window_width - board_extent) / 2
    bottom = BOARD_BOTTOM_MARGIN
    return tile_size, left, bottom


def tile_colors(value: int) -> Tuple[Color, Color]:
    """Background and text colour for a tile value."""
    if value == 0:
        return EMPTY_TILE_COLOR, EMPTY_TILE_COLOR
    background = TILE_COLORS.get(value, SUPER_TILE_COLOR)
    text = DARK_TEXT if value <= 4 else LIGHT_TEXT
    return background, text


def font_size_for(value: int, tile_size: int) -> int:
    digits = len(str(value))
    scale = 0.45 if digits <= 2 else 0.36 if digits == 3 else 0.28
    return max(8, int(tile_size * scale))


class BoardRenderSystem:
    """Draws the board each frame.

    Spawned cells arrive through ``EVENT_TILES_SPAWNED`` and are outlined for a
    single frame; the set is consumed by ``process``.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._fresh: Set[Position] = set()
        self.event_bus.subscribe(EVENT_TILES_SPAWNED, self.on_tiles_spawned)

    def on_tiles_spawned(self, sender, **kwargs):
        positions = kwargs.get('positions') or []
        self._fresh.update(tuple(pos) for pos in positions)

    def consume_fresh(self) -> Set[Position]:
        fresh, self._fresh = self._fresh, set()
        return fresh

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade

        fresh = self.consume_fresh()
        board, score = self._board_and_score()
        if board is None:
            return
        tile_size, left, bottom = compute_board_geometry(self.window.width, self.window.height, board.size)
        extent = board.size * tile_size + (board.size + 1) * TILE_GAP
        arcade.draw_lbwh_rectangle_filled(left, bottom, extent, extent, BOARD_BACKGROUND)

        for row in range(board.size):
            for col in range(board.size):
                value = board.get(row, col)
                # Row 0 is the top line of the board.
                x = left + TILE_GAP + col * (tile_size + TILE_GAP)
                y = bottom + TILE_GAP + (board.size - 1 - row) * (tile_size + TILE_GAP)
                background, text_color = tile_colors(value)
                arcade.draw_lbwh_rectangle_filled(x, y, tile_size, tile_size, background)
                if value == 0:
                    continue
                if (row, col) in fresh:
                    arcade.draw_lbwh_rectangle_outline(x, y, tile_size, tile_size, SPAWN_OUTLINE_COLOR, border_width=3)
                arcade.draw_text(
                    str(value),
                    x + tile_size / 2,
                    y + tile_size / 2,
                    text_color,
                    font_size_for(value, tile_size),
                    anchor_x="center",
                    anchor_y="center",
                    bold=True,
                )

        self._draw_header(arcade, score, left, bottom + extent)
        self._draw_banner(arcade)

    def _draw_header(self, arcade: Any, score: Score | None, left: float, board_top: float) -> None:
        hiscore = self._hiscore()
        value = score.value if score else 0
        max_tile = score.max_tile if score else 0
        best = hiscore.score if hiscore else 0
        best_max = hiscore.max_tile if hiscore else 0
        text_y = board_top + 20
        arcade.draw_text(f"Score {value}   Max {max_tile}", left, text_y + 30, DARK_TEXT, 18, bold=True)
        arcade.draw_text(f"Best {best}   Best max {best_max}", left, text_y, DARK_TEXT, 14)

    def _draw_banner(self, arcade: Any) -> None:
        state = get_game_state(self.world)
        if state is None or not state.mode.terminal:
            return
        label = "You win!" if state.mode == GameMode.WON else "Game over"
        arcade.draw_lbwh_rectangle_filled(0, self.window.height / 2 - 40, self.window.width, 80, (250, 248, 239, 200))
        arcade.draw_text(
            f"{label}  (Esc to quit)",
            self.window.width / 2,
            self.window.height / 2,
            DARK_TEXT,
            26,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _board_and_score(self) -> Tuple[Board | None, Score | None]:
        for _, (board, score) in self.world.get_components(Board, Score):
            return board, score
        return None, None

    def _hiscore(self) -> HiScore | None:
        for _, hiscore in self.world.get_component(HiScore):
            return hiscore
        return None
