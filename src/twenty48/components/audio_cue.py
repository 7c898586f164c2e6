from enum import Enum


class AudioCue(str, Enum):
    """Abstract feedback cues; the audio collaborator decides how they sound."""
    MOVE_NO_MERGE = "move_no_merge"
    MOVE_WITH_MERGE = "move_with_merge"
    ILLEGAL_MOVE = "illegal_move"
    WIN = "win"
    LOSE = "lose"
