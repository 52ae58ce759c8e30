"""
Board: the initial puzzle plus the player's undoable move log.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from .automaton import validate
from .cell import Cell
from .grid import Grid, RC
from .models import ValidationOutcome
from .moves import Blacken, BoardStep, ChangeLetter, MarkPath, Move
from .parsing import parse_puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class Board(BaseModel):
    """
    Holds the puzzle and the player's moves.

    Mutation methods accept any in-range move and never judge legality;
    rules are only checked by ``check_solution``, which replays the moves
    against the initial grid. Every step keeps a snapshot of the grid after
    the move so that undo and ``get`` are O(1).

    Attributes:
        initial_grid: The puzzle as parsed, never mutated
        steps: The move log, oldest first
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    initial_grid: Grid
    steps: List[BoardStep] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """
        Create a board from puzzle text, one line per row.

        Raises:
            BoardParseError: If the puzzle text is malformed
        """
        return cls(initial_grid=parse_puzzle(text))

    @property
    def width(self) -> int:
        return self.initial_grid.width

    @property
    def height(self) -> int:
        return self.initial_grid.height

    @property
    def current_grid(self) -> Grid:
        """The grid after the latest move."""
        if self.steps:
            return self.steps[-1].grid
        return self.initial_grid

    @property
    def moves(self) -> List[Move]:
        return [step.move for step in self.steps]

    def get(self, row: int, col: int) -> Cell:
        return self.current_grid.cell(row, col)

    def _push(self, move: Move, grid: Grid) -> None:
        self.steps.append(BoardStep(move=move, grid=grid))

    def blacken(self, row: int, col: int) -> None:
        grid = self.current_grid.clone()
        grid[RC(row, col)].blacken()
        self._push(Blacken(row=row, col=col), grid)

    def mark_path(self, row: int, col: int) -> None:
        grid = self.current_grid.clone()
        grid[RC(row, col)].mark_path()
        self._push(MarkPath(row=row, col=col), grid)

    def change_letter(self, row: int, col: int, letter: str) -> bool:
        """
        Rewrite a cell's letter.

        A refused letter is not recorded as a move at all.

        Returns:
            True if the change was recorded
        """
        grid = self.current_grid.clone()
        if not grid[RC(row, col)].try_change_letter(letter):
            LOGGER.debug("Ignoring letter change of (%d,%d) to %r", row, col, letter)
            return False
        self._push(ChangeLetter(row=row, col=col, letter=letter), grid)
        return True

    def undo(self) -> None:
        """Drop the latest move, if any."""
        if self.steps:
            self.steps.pop()

    def check_solution(self) -> ValidationOutcome:
        """Replay every recorded move from the initial grid and judge the result."""
        return validate(self.initial_grid, self.moves)
