"""Puzzle text parsing."""

from typing import List

from .cell import Cell, is_valid_glyph
from .grid import Grid, RC
from .models import BoardParseError


def extract_puzzle_lines(text: str) -> List[str]:
    """Split puzzle text into rows, dropping leading and trailing empty lines."""
    lines = text.split('\n')
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return [line.rstrip('\r') for line in lines]


def parse_puzzle(text: str) -> Grid[Cell]:
    """
    Parse puzzle text into the initial grid.

    One line per row; every row must have the same length.

    Raises:
        BoardParseError: If the text is empty, ragged, or holds unknown characters
    """
    lines = extract_puzzle_lines(text)
    if not lines:
        raise BoardParseError("Puzzle text is empty")

    width = len(lines[0])
    if width == 0:
        raise BoardParseError("Puzzle rows are empty")

    for i, line in enumerate(lines, start=1):
        if len(line) != width:
            raise BoardParseError(
                f"Ragged puzzle: row {i} has {len(line)} cells, expected {width}"
            )

    grid: Grid[Cell] = Grid(width, len(lines), Cell())
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if not is_valid_glyph(char):
                raise BoardParseError(f"Unknown character {char!r} at ({row},{col})")
            grid[RC(row, col)] = Cell.from_glyph(char)

    return grid
