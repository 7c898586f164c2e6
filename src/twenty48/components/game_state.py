"""Game state resource describing the session's high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto

from twenty48.constants import WINNING_VALUE


class GameMode(Enum):
    """Session modes; WON and LOST are terminal."""
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def terminal(self) -> bool:
        return self is not GameMode.PLAYING


@dataclass
class GameState:
    """Singleton component storing the mode, win target and accepted move count."""
    mode: GameMode = GameMode.PLAYING
    target: int = WINNING_VALUE
    moves: int = 0
