"""
Pydantic models for the replay layer.

A replay config holds a puzzle and a recorded list of player actions; the
runner feeds those actions through the Board mutation API exactly as an
interactive front end would.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..engine.models import PuzzleError, ValidationOutcome
from ..engine.moves import Blacken, ChangeLetter, MarkPath


# Type aliases
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Undo(BaseModel):
    """Take back the latest recorded move."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["undo"] = "undo"


ReplayAction = Annotated[
    Union[Blacken, MarkPath, ChangeLetter, Undo],
    Field(discriminator="kind"),
]


class ReplayActionError(PuzzleError):
    """Raised when a recorded action cannot be applied to the board."""


class ReplayConfig(BaseModel):
    """Configuration for a replay run."""
    model_config = ConfigDict(extra='forbid')

    puzzle: str
    moves: List[ReplayAction] = Field(default_factory=list)
    log_level: LogLevel = "WARNING"


class ReplayResult(BaseModel):
    """Result of a replay run."""
    outcome: ValidationOutcome
    width: int
    height: int
    actions_applied: int = 0
    moves_recorded: int = 0
    rejected_letter_changes: int = 0
    board: Optional[str] = None  # Rendered final board
