from twenty48.components.board import Board
from twenty48.components.game_state import GameMode
from twenty48.components.score import Score


def is_win(score: Score, target: int) -> bool:
    return score.max_tile >= target


def is_loss(board: Board) -> bool:
    """No empty cell and no equal neighbours: no direction can change the board."""
    return board.is_full() and not board.has_adjacent_equal_pair()


def evaluate(board: Board, score: Score, target: int) -> GameMode:
    """Classify the board after a move and its spawn have both been applied.

    Reaching the target wins even if the same move also left the board locked.
    """
    if is_win(score, target):
        return GameMode.WON
    if is_loss(board):
        return GameMode.LOST
    return GameMode.PLAYING
