"""Replay recorded player actions against a puzzle and judge the result."""

from pathlib import Path
from typing import Union

import yaml

from .models import ReplayActionError, ReplayConfig, ReplayResult, Undo
from ..engine.board import Board
from ..engine.moves import Blacken, ChangeLetter, MarkPath
from ..utils.board_visualizer import render_board
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def load_config(config_path: Union[str, Path]) -> ReplayConfig:
    """Load a replay configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ReplayConfig(**(data or {}))


def run_replay(config: ReplayConfig) -> ReplayResult:
    """
    Build the board, apply every action through the mutation API, then validate.

    Raises:
        BoardParseError: If the puzzle text is malformed
        ReplayActionError: If an action targets a cell outside the board
    """
    board = Board.from_text(config.puzzle)
    LOGGER.info("Loaded %dx%d puzzle", board.width, board.height)

    rejected = 0
    for index, action in enumerate(config.moves):
        if not isinstance(action, Undo) and not board.initial_grid.contains(action.position):
            raise ReplayActionError(
                f"Action {index} ({action.kind}) targets ({action.row},{action.col}) "
                f"outside the {board.height}x{board.width} board"
            )
        if isinstance(action, Undo):
            board.undo()
        elif isinstance(action, Blacken):
            board.blacken(action.row, action.col)
        elif isinstance(action, MarkPath):
            board.mark_path(action.row, action.col)
        elif isinstance(action, ChangeLetter):
            if not board.change_letter(action.row, action.col, action.letter):
                rejected += 1

    outcome = board.check_solution()
    if outcome.error is not None:
        LOGGER.info(
            "Outcome %s: move %d %s (%s)",
            outcome.status,
            outcome.error.move_index,
            outcome.error.code,
            outcome.error.message,
        )
    else:
        LOGGER.info("Outcome %s", outcome.status)

    return ReplayResult(
        outcome=outcome,
        width=board.width,
        height=board.height,
        actions_applied=len(config.moves),
        moves_recorded=len(board.steps),
        rejected_letter_changes=rejected,
        board=render_board(board),
    )
