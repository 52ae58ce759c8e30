"""Move-log validation engine for LOK puzzles."""

from .board import Board
from .cell import Cell, GAP, BLANK, CONDUCTOR, WILDCARD
from .grid import Grid, RC
from .moves import Move, Blacken, MarkPath, ChangeLetter, BoardStep
from .models import (
    ValidationOutcome,
    MoveError,
    OutcomeStatus,
    MoveErrorCode,
    PuzzleError,
    BoardParseError,
)
from .parsing import parse_puzzle
from .connectivity import is_adjacent, is_connected_for_keyword, is_on_lolo_path
from .automaton import validate, apply_move, KNOWN_KEYWORDS

__all__ = [
    # Board and move log
    "Board",
    "BoardStep",
    # Grid and cells
    "Grid",
    "RC",
    "Cell",
    "GAP",
    "BLANK",
    "CONDUCTOR",
    "WILDCARD",
    # Moves
    "Move",
    "Blacken",
    "MarkPath",
    "ChangeLetter",
    # Outcomes and errors
    "ValidationOutcome",
    "MoveError",
    "OutcomeStatus",
    "MoveErrorCode",
    "PuzzleError",
    "BoardParseError",
    # Parsing
    "parse_puzzle",
    # Connectivity
    "is_adjacent",
    "is_connected_for_keyword",
    "is_on_lolo_path",
    # Automaton
    "validate",
    "apply_move",
    "KNOWN_KEYWORDS",
]
