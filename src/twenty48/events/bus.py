from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS_RAW = "key_press_raw"              # payload: symbol=int, modifiers=int
EVENT_MOVE_REQUEST = "move_request"                # payload: direction=Direction
EVENT_QUIT_REQUEST = "quit_request"                # payload: None


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_MOVED = "board_moved"                  # payload: direction, merged=bool, score_delta=int, score=int, max_tile=int
EVENT_MOVE_REJECTED = "move_rejected"              # payload: direction, reason=str
EVENT_TILES_SPAWNED = "tiles_spawned"              # payload: positions=[(r,c),...]


# ============================================================================
# FEEDBACK
# ============================================================================
EVENT_AUDIO_CUE = "audio_cue"                      # payload: cue=AudioCue


# ============================================================================
# GAME FLOW & PERSISTENCE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode, new_mode=GameMode
EVENT_SESSION_END = "session_end"                  # payload: score=int, max_tile=int
EVENT_HISCORE_UPDATED = "hiscore_updated"          # payload: hi_score=int, hi_max=int
