"""
Grid connectivity predicates used by the validation automaton.

- Straight-line adjacency through done cells (TLAK execution)
- Keyword connectivity with bends at conductors (keyword gathering)
- Membership of the lower-left to upper-right diagonal (LOLO execution)
"""

from typing import Callable, Sequence, Tuple

from .cell import Cell
from .grid import Grid, RC
from .moves import Move


def is_aligned(a: RC, b: RC) -> bool:
    """True if the two positions share a row or a column."""
    return a.row == b.row or a.col == b.col


def unit_direction(a: RC, b: RC) -> Tuple[int, int]:
    """The unit step leading from ``a`` toward ``b``."""
    assert a != b and is_aligned(a, b), f"No straight direction from {a} to {b}"
    dr = (b.row > a.row) - (b.row < a.row)
    dc = (b.col > a.col) - (b.col < a.col)
    return dr, dc


def _walk(
    grid: Grid[Cell],
    start: RC,
    end: RC,
    passable: Callable[[Cell], bool],
) -> bool:
    """Step from ``start`` to ``end``; every cell strictly between must be passable."""
    dr, dc = unit_direction(start, end)
    current = RC(start.row + dr, start.col + dc)
    while grid.contains(current):
        if current == end:
            return True
        if not passable(grid[current]):
            return False
        current = RC(current.row + dr, current.col + dc)
    return False


def is_adjacent(grid: Grid[Cell], a: RC, b: RC) -> bool:
    """
    True if ``b`` can be reached from ``a`` in a straight line
    through done cells only.
    """
    if a == b or not is_aligned(a, b):
        return False
    return _walk(grid, a, b, lambda cell: cell.is_traversible_for_adjacency)


def is_connected_for_keyword(
    grid: Grid[Cell],
    prior_moves: Sequence[Move],
    candidate: RC,
) -> bool:
    """
    Check that ``candidate`` continues the path of the keyword being gathered.

    The path runs in straight lines through done cells and active conductors.
    It may only turn at a conductor that was itself part of the path (the
    previous move), and never turn back on itself there.
    """
    if not prior_moves:
        return True

    rc1 = prior_moves[-1].position
    if rc1 == candidate or not is_aligned(rc1, candidate):
        return False

    direction = unit_direction(rc1, candidate)
    if len(prior_moves) >= 2:
        rc0 = prior_moves[-2].position
        incoming = unit_direction(rc0, rc1)
        if grid[rc1].is_active_conductor:
            if direction == (-incoming[0], -incoming[1]):
                return False
        elif direction != incoming:
            return False

    return _walk(grid, rc1, candidate, lambda cell: cell.is_traversible_for_keyword)


def is_on_lolo_path(anchor: RC, target: RC) -> bool:
    """True if ``target`` is strictly on the rising diagonal through ``anchor``."""
    dr = target.row - anchor.row
    dc = target.col - anchor.col
    return dr != 0 and dr == -dc
