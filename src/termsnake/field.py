# field.py

import numpy as np  # type: ignore

from .errors import InvalidDimensions, NoEmptyCell


class Field:
    """
    Flat, row-major grid of snake-body lifetimes.

    A cell holding 0 is empty. A cell holding n > 0 belongs to the snake and
    empties after n more moves without eating: the head holds the snake's
    length, the tail holds 1.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self.cells = np.zeros(width * height, dtype=np.int32)

    @classmethod
    def create(cls, width: int, height: int) -> "Field":
        return cls(width, height)

    @property
    def size(self) -> int:
        return self.width * self.height

    # ---------- Writes ----------
    def seed_snake(self, head_pos: int, length: int) -> None:
        """
        Paint a straight snake: head_pos gets `length`, and the body trails
        towards increasing indices down to 1 at the tail.
        """
        tail_end = head_pos + length
        if head_pos < 0 or tail_end > self.size:
            raise IndexError(
                f"snake of length {length} at {head_pos} does not fit a field of {self.size} cells"
            )
        self.cells[head_pos:tail_end] = np.arange(length, 0, -1, dtype=np.int32)

    def decay(self) -> None:
        """Age every body cell by one move; cells reaching 0 become empty."""
        self.cells[self.cells > 0] -= 1

    def occupy(self, pos: int, value: int) -> None:
        self.cells[pos] = value

    # ---------- Reads ----------
    def get(self, pos: int) -> int:
        return int(self.cells[pos])

    def is_empty(self, pos: int) -> bool:
        return bool(self.cells[pos] == 0)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def empty_count(self) -> int:
        return self.size - self.occupied_count()

    def find_nth_empty(self, n: int) -> int:
        """Return the position of the n-th empty cell (0-based, row-major scan)."""
        empties = np.flatnonzero(self.cells == 0)
        if n < 0 or n >= len(empties):
            raise NoEmptyCell(n, len(empties))
        return int(empties[n])

    def rows(self) -> np.ndarray:
        """2D (height, width) view of the cells."""
        return self.cells.reshape(self.height, self.width)

    def __repr__(self) -> str:
        return f"Field({self.width}x{self.height}, occupied={self.occupied_count()})"
