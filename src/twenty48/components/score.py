from dataclasses import dataclass

@dataclass(slots=True)
class Score:
    """Running score and the largest tile ever seen on the board."""
    value: int = 0
    max_tile: int = 0

    def add(self, amount: int) -> None:
        if amount > 0:
            self.value += amount

    def observe_tile(self, tile: int) -> None:
        if tile > self.max_tile:
            self.max_tile = tile
