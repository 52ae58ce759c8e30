"""Data models and exceptions for move-log validation."""

from typing import Literal, Optional
from pydantic import BaseModel

from .moves import Move


OutcomeStatus = Literal[
    "CORRECT",          # every move legal, every interactive cell done
    "INCOMPLETE",       # every move legal, some interactive cell not done
    "NOT_IDLE",         # ended while executing a keyword
    "PARTIAL_KEYWORD",  # ended with an unmatched gathered prefix
    "ERROR_ON_MOVE",    # a move was illegal
]

MoveErrorCode = Literal[
    "ALREADY_BLACKENED",
    "BLACKEN_NOT_CONNECTED_FOR_KEYWORD",
    "GATHERING_NON_LETTER",
    "UNKNOWN_KEYWORD",
    "TLAK_NOT_ADJACENT",
    "TA_INVALID_LETTER",
    "TA_LETTER_MISMATCH",
    "BE_CANNOT_BLACKEN",
    "LOLO_NOT_ON_PATH",
    "CANNOT_MARK_WHILE_EXECUTING",
    "PATH_NOT_CONNECTED_FOR_KEYWORD",
    "CELL_CANNOT_CHANGE_LETTER_IN_THIS_STATE",
    "CANNOT_CHANGE_TO_THIS_LETTER",
    "BE_CANNOT_CHANGE_NON_BLANK_CELL",
    "BE_CANNOT_CHANGE_TO_THIS_LETTER",
]


class MoveError(BaseModel):
    """The first illegal move of a move log."""
    code: MoveErrorCode
    message: str
    move_index: int
    move: Move


class ValidationOutcome(BaseModel):
    """Result of replaying a move log."""
    status: OutcomeStatus
    error: Optional[MoveError] = None
    partial_keyword: Optional[str] = None  # set for PARTIAL_KEYWORD
    pending_state: Optional[str] = None  # set for NOT_IDLE

    @property
    def is_correct(self) -> bool:
        return self.status == "CORRECT"


class PuzzleError(Exception):
    """Base exception for puzzle failures."""


class BoardParseError(PuzzleError):
    """Raised when puzzle text cannot be turned into a grid."""


class IllegalMove(PuzzleError):
    """Raised inside the automaton when a move breaks the rules."""

    def __init__(self, code: MoveErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
