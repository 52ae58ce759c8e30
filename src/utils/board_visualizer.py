from typing import TYPE_CHECKING

from ..engine.cell import Cell
from ..engine.grid import Grid

if TYPE_CHECKING:
    from ..engine.board import Board

BLACKENED = '#'


def render_cell(cell: Cell) -> str:
    """Blackened cells as '#', marked cells in lower case, gaps as space."""
    if cell.is_blackened:
        return BLACKENED
    if cell.is_marked_for_path:
        return cell.display.lower()
    return cell.display


def render_grid(grid: Grid[Cell]) -> str:
    """Render the grid to a string, one line per row."""
    lines = []
    for row in range(grid.height):
        lines.append(''.join(render_cell(grid.cell(row, col)) for col in range(grid.width)))
    return '\n'.join(lines)


def render_board(board: "Board") -> str:
    """Render the board as it stands after the latest move."""
    return render_grid(board.current_grid)
