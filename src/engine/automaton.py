"""
Validation automaton: replays a move log against the initial grid.

The automaton alternates between two phases:
1. Gathering: blackened cells spell out a keyword along a connected path
2. Executing: the matched keyword's obligation is fulfilled

Keywords and their obligations:
- LOK: blacken any one cell
- TLAK: blacken two cells adjacent through done cells
- TA: blacken every cell carrying one chosen letter (or blank)
- BE: write a letter into one blank cell
- LOLO: blacken the rising diagonal through a chosen cell
"""

from typing import Dict, List, Optional, Sequence, Type, Union
from pydantic import BaseModel, ConfigDict, Field

from .cell import BLANK, GAP, Cell
from .connectivity import is_adjacent, is_connected_for_keyword, is_on_lolo_path
from .grid import Grid, RC
from .models import IllegalMove, MoveError, ValidationOutcome
from .moves import Blacken, ChangeLetter, MarkPath, Move
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class _State(BaseModel):
    model_config = ConfigDict(frozen=True)


class GatheringKeyword(_State):
    """Collecting letters; idle when nothing has been gathered yet."""
    partial: str = ""
    moves: List[Move] = Field(default_factory=list)


class ExecutingLOK(_State):
    pass


class ExecutingTLAK(_State):
    anchor: Optional[RC] = None


class ExecutingTA(_State):
    letter: Optional[str] = None


class ExecutingBE(_State):
    pass


class ExecutingLOLO(_State):
    anchor: Optional[RC] = None


BoardState = Union[
    GatheringKeyword,
    ExecutingLOK,
    ExecutingTLAK,
    ExecutingTA,
    ExecutingBE,
    ExecutingLOLO,
]

KNOWN_KEYWORDS: Dict[str, Type[_State]] = {
    "LOK": ExecutingLOK,
    "TLAK": ExecutingTLAK,
    "TA": ExecutingTA,
    "BE": ExecutingBE,
    "LOLO": ExecutingLOLO,
}

assert not any(
    a != b and b.startswith(a) for a in KNOWN_KEYWORDS for b in KNOWN_KEYWORDS
), "Keyword table must be prefix-free"


def _idle() -> GatheringKeyword:
    return GatheringKeyword()


def _is_keyword_prefix(partial: str) -> bool:
    return any(keyword.startswith(partial) for keyword in KNOWN_KEYWORDS)


# ---------------------------------------------------------------------------
# Blacken
# ---------------------------------------------------------------------------

def _gather_letter(state: GatheringKeyword, grid: Grid[Cell], move: Blacken) -> BoardState:
    rc = move.position
    if not is_connected_for_keyword(grid, state.moves, rc):
        raise IllegalMove(
            "BLACKEN_NOT_CONNECTED_FOR_KEYWORD",
            f"{tuple(rc)} does not continue the path of '{state.partial}'",
        )

    letter = grid[rc].get_letter()
    if letter is None:
        raise IllegalMove("GATHERING_NON_LETTER", f"{tuple(rc)} holds no letter to gather")

    partial = state.partial + letter
    if not _is_keyword_prefix(partial):
        raise IllegalMove("UNKNOWN_KEYWORD", f"No keyword starts with '{partial}'")

    moves = [*state.moves, move]
    executing = KNOWN_KEYWORDS.get(partial)
    if executing is None:
        return GatheringKeyword(partial=partial, moves=moves)

    for gathered in moves:
        if isinstance(gathered, Blacken):
            grid[gathered.position].blacken()
    LOGGER.debug("Matched keyword %s", partial)
    return executing()


def _execute_tlak(state: ExecutingTLAK, grid: Grid[Cell], rc: RC) -> BoardState:
    if state.anchor is not None and not is_adjacent(grid, state.anchor, rc):
        raise IllegalMove(
            "TLAK_NOT_ADJACENT",
            f"{tuple(rc)} is not adjacent to {tuple(state.anchor)}",
        )
    grid[rc].blacken()
    if state.anchor is not None:
        return _idle()
    return ExecutingTLAK(anchor=rc)


def _execute_ta(state: ExecutingTA, grid: Grid[Cell], rc: RC) -> BoardState:
    letter = grid[rc].get_letter_or_blank()
    if letter is None:
        raise IllegalMove("TA_INVALID_LETTER", f"{tuple(rc)} holds no letter for TA")
    if state.letter is not None and state.letter != letter:
        raise IllegalMove(
            "TA_LETTER_MISMATCH",
            f"TA is removing '{state.letter}' but {tuple(rc)} holds '{letter}'",
        )

    grid[rc].blacken()
    remaining = any(
        not cell.is_blackened and cell.get_letter_or_blank() == letter
        for _, cell in grid.enumerate_row_col()
    )
    return ExecutingTA(letter=letter) if remaining else _idle()


def _execute_lolo(state: ExecutingLOLO, grid: Grid[Cell], rc: RC) -> BoardState:
    anchor = state.anchor
    if anchor is None:
        anchor = rc
    elif not is_on_lolo_path(anchor, rc):
        raise IllegalMove(
            "LOLO_NOT_ON_PATH",
            f"{tuple(rc)} is not on the diagonal through {tuple(anchor)}",
        )

    grid[rc].blacken()
    remaining = any(
        not cell.is_done and is_on_lolo_path(anchor, pos)
        for pos, cell in grid.enumerate_row_col()
    )
    return ExecutingLOLO(anchor=anchor) if remaining else _idle()


def _apply_blacken(state: BoardState, grid: Grid[Cell], move: Blacken) -> BoardState:
    rc = move.position
    if isinstance(state, GatheringKeyword):
        return _gather_letter(state, grid, move)
    if isinstance(state, ExecutingLOK):
        grid[rc].blacken()
        return _idle()
    if isinstance(state, ExecutingTLAK):
        return _execute_tlak(state, grid, rc)
    if isinstance(state, ExecutingTA):
        return _execute_ta(state, grid, rc)
    if isinstance(state, ExecutingBE):
        raise IllegalMove("BE_CANNOT_BLACKEN", "BE writes a letter, it cannot blacken")
    if isinstance(state, ExecutingLOLO):
        return _execute_lolo(state, grid, rc)
    raise AssertionError(f"Unhandled state {state!r}")


# ---------------------------------------------------------------------------
# Mark path / change letter
# ---------------------------------------------------------------------------

def _apply_mark_path(state: BoardState, grid: Grid[Cell], move: MarkPath) -> BoardState:
    if not isinstance(state, GatheringKeyword):
        raise IllegalMove(
            "CANNOT_MARK_WHILE_EXECUTING",
            f"Cannot mark a path while executing {type(state).__name__}",
        )
    rc = move.position
    if not is_connected_for_keyword(grid, state.moves, rc):
        raise IllegalMove(
            "PATH_NOT_CONNECTED_FOR_KEYWORD",
            f"{tuple(rc)} does not continue the path of '{state.partial}'",
        )
    grid[rc].mark_path()
    return GatheringKeyword(partial=state.partial, moves=[*state.moves, move])


def _apply_change_letter(state: BoardState, grid: Grid[Cell], move: ChangeLetter) -> BoardState:
    rc = move.position
    cell = grid[rc]

    if isinstance(state, ExecutingBE):
        if not cell.is_blank:
            raise IllegalMove(
                "BE_CANNOT_CHANGE_NON_BLANK_CELL",
                f"BE can only write into a blank cell, {tuple(rc)} holds '{cell.display}'",
            )
        if move.letter in (GAP, BLANK) or not cell.try_change_letter(move.letter):
            raise IllegalMove(
                "BE_CANNOT_CHANGE_TO_THIS_LETTER",
                f"BE cannot write '{move.letter}'",
            )
        return _idle()

    if not cell.was_ever_wildcard:
        raise IllegalMove(
            "CELL_CANNOT_CHANGE_LETTER_IN_THIS_STATE",
            f"{tuple(rc)} is not a wildcard",
        )
    if not cell.try_change_letter(move.letter):
        raise IllegalMove(
            "CANNOT_CHANGE_TO_THIS_LETTER",
            f"Cannot change {tuple(rc)} to '{move.letter}'",
        )
    return state


def apply_move(state: BoardState, grid: Grid[Cell], move: Move) -> BoardState:
    """
    Apply one move to the replay grid and return the next state.

    Raises:
        IllegalMove: If the move breaks the rules in the current state
    """
    rc = move.position
    if grid[rc].is_blackened:
        raise IllegalMove("ALREADY_BLACKENED", f"{tuple(rc)} is already blackened")

    if isinstance(move, Blacken):
        return _apply_blacken(state, grid, move)
    if isinstance(move, MarkPath):
        return _apply_mark_path(state, grid, move)
    if isinstance(move, ChangeLetter):
        return _apply_change_letter(state, grid, move)
    raise AssertionError(f"Unhandled move {move!r}")


def validate(initial_grid: Grid[Cell], moves: Sequence[Move]) -> ValidationOutcome:
    """
    Replay ``moves`` against a private copy of ``initial_grid``.

    Returns a ValidationOutcome with:
    - CORRECT if every move is legal and every interactive cell ends done
    - ERROR_ON_MOVE with the first illegal move
    - PARTIAL_KEYWORD / NOT_IDLE if the log stops mid-keyword
    - INCOMPLETE if some interactive cell was never finished
    """
    grid = initial_grid.clone()
    state: BoardState = _idle()

    for index, move in enumerate(moves):
        try:
            next_state = apply_move(state, grid, move)
        except IllegalMove as exc:
            LOGGER.debug("Move %d (%s) rejected: %s", index, move.kind, exc.message)
            return ValidationOutcome(
                status="ERROR_ON_MOVE",
                error=MoveError(
                    code=exc.code,
                    message=exc.message,
                    move_index=index,
                    move=move,
                ),
            )
        if type(next_state) is not type(state):
            LOGGER.debug(
                "Move %d: %s -> %s", index, type(state).__name__, type(next_state).__name__
            )
        state = next_state

    if isinstance(state, GatheringKeyword) and state.partial:
        return ValidationOutcome(status="PARTIAL_KEYWORD", partial_keyword=state.partial)
    if not isinstance(state, GatheringKeyword):
        return ValidationOutcome(status="NOT_IDLE", pending_state=type(state).__name__)

    if not all(cell.is_done for cell in grid.cells() if cell.is_interactive):
        return ValidationOutcome(status="INCOMPLETE")
    return ValidationOutcome(status="CORRECT")
