"""Fixed-size grid container with row/column addressing."""

import copy
from typing import Generic, Iterator, List, NamedTuple, Tuple, TypeVar

T = TypeVar("T")


class RC(NamedTuple):
    """A row/column pair for indexing into the grid."""
    row: int
    col: int


class Grid(Generic[T]):
    """
    A simple grid of user-defined objects stored in row-major order.

    Index it with ``(row, col)`` pairs. Out-of-range indices are programmer
    errors and fail an assertion rather than raising a recoverable error.
    """

    def __init__(self, width: int, height: int, template: T):
        assert width >= 0 and height >= 0, f"Invalid grid size {width}x{height}"
        self._width = width
        self._height = height
        self._cells: List[T] = [copy.deepcopy(template) for _ in range(width * height)]

    @property
    def width(self) -> int:
        """The width of the grid in cells."""
        return self._width

    @property
    def height(self) -> int:
        """The height of the grid in cells."""
        return self._height

    def contains(self, rc: Tuple[int, int]) -> bool:
        row, col = rc
        return 0 <= row < self._height and 0 <= col < self._width

    def _index(self, rc: Tuple[int, int]) -> int:
        assert self.contains(rc), f"{tuple(rc)} outside {self._height}x{self._width} grid"
        row, col = rc
        return row * self._width + col

    def __getitem__(self, rc: Tuple[int, int]) -> T:
        return self._cells[self._index(rc)]

    def __setitem__(self, rc: Tuple[int, int], value: T) -> None:
        self._cells[self._index(rc)] = value

    def cell(self, row: int, col: int) -> T:
        return self[RC(row, col)]

    def cells(self) -> List[T]:
        """The backing list in reading order."""
        return self._cells

    def enumerate_row_col(self) -> Iterator[Tuple[RC, T]]:
        """Yield ``(RC, value)`` for every cell, low to high row then column."""
        for row in range(self._height):
            for col in range(self._width):
                yield RC(row, col), self._cells[row * self._width + col]

    def clone(self) -> "Grid[T]":
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
