from typing import List, Tuple

from ..utils.cell_compress import CELL_WIDTH

# Link slots, clockwise starting at the left neighbour.
LEFT = 0
UP_LEFT = 1
UP_RIGHT = 2
RIGHT = 3
BOTTOM_RIGHT = 4
BOTTOM_LEFT = 5
DIRECTIONS = (LEFT, UP_LEFT, UP_RIGHT, RIGHT, BOTTOM_RIGHT, BOTTOM_LEFT)


class Cell:
    """Mutable board cell. ``capacity == 0`` marks a hole."""
    __slots__ = ("owner", "power", "capacity", "links")

    def __init__(self, owner: int = 0, power: int = 0, capacity: int = 0, links: List[bool] | None = None):
        self.owner = owner
        self.power = power
        self.capacity = capacity
        self.links = list(links) if links is not None else [False] * 6

    @property
    def is_hole(self) -> bool:
        return self.capacity == 0

    def clear(self) -> None:
        self.owner = 0
        self.power = 0
        self.capacity = 0
        self.links = [False] * 6

    def link_count(self) -> int:
        return sum(1 for flag in self.links if flag)

    def to_list(self) -> List[int]:
        return [self.owner, self.power, self.capacity] + [int(flag) for flag in self.links]

    @classmethod
    def from_list(cls, values: List[int]) -> "Cell":
        if len(values) != CELL_WIDTH:
            raise ValueError(f"cell needs {CELL_WIDTH} fields, got {len(values)}")
        return cls(values[0], values[1], values[2], [bool(v) for v in values[3:]])

    def __repr__(self):
        return f"Cell(owner={self.owner}, power={self.power}, capacity={self.capacity}, links={self.to_list()[3:]})"


Grid = List[List[Cell]]
Coord = Tuple[int, int]
