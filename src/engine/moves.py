"""Player moves and board steps."""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

from .grid import Grid, RC


class _TargetedMove(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)

    @property
    def position(self) -> RC:
        return RC(self.row, self.col)


class Blacken(_TargetedMove):
    """Blacken a cell: gathers a letter or executes a keyword."""
    kind: Literal["blacken"] = "blacken"


class MarkPath(_TargetedMove):
    """Mark a transit cell while gathering a keyword."""
    kind: Literal["mark_path"] = "mark_path"


class ChangeLetter(_TargetedMove):
    """Rewrite the letter of a wildcard or blank cell."""
    kind: Literal["change_letter"] = "change_letter"
    letter: str = Field(..., min_length=1, max_length=1)


Move = Annotated[Union[Blacken, MarkPath, ChangeLetter], Field(discriminator="kind")]


class BoardStep(BaseModel):
    """A move paired with the grid as it stood right after the move."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    move: Move
    grid: Grid
