from dataclasses import dataclass

@dataclass(slots=True)
class HiScore:
    """Best score and best tile across sessions, as loaded at startup."""
    score: int = 0
    max_tile: int = 0
