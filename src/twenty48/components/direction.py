from enum import Enum


class Direction(str, Enum):
    """Move directions, each described by the axis it travels along and its orientation.

    ``axis`` is "row" when tiles travel along a row (LEFT/RIGHT) and "col" when
    they travel along a column (UP/DOWN). ``toward_end`` is True when the target
    edge is the high index of that line (RIGHT, DOWN).
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def axis(self) -> str:
        return "row" if self in (Direction.LEFT, Direction.RIGHT) else "col"

    @property
    def toward_end(self) -> bool:
        return self in (Direction.RIGHT, Direction.DOWN)
