"""Per-cell state and the letter-class predicates built on it."""

from typing import Optional
from pydantic import BaseModel


# Puzzle glyphs
GAP = '-'
BLANK = '_'
CONDUCTOR = 'X'
WILDCARD = '*'

SPECIAL_GLYPHS = frozenset({GAP, BLANK, CONDUCTOR, WILDCARD})


def is_valid_glyph(char: str) -> bool:
    """True for a single ASCII letter or one of the special glyphs."""
    if len(char) != 1:
        return False
    return char in SPECIAL_GLYPHS or (char.isascii() and char.isalpha())


class Cell(BaseModel):
    """
    A single board cell.

    A ``letter`` of ``None`` is a gap: inert and always done. Every other
    cell is interactive, including blanks and conductors.
    """
    letter: Optional[str] = None
    is_blackened: bool = False
    is_marked_for_path: bool = False
    was_ever_wildcard: bool = False
    mark_count: int = 0  # render-only

    @classmethod
    def from_glyph(cls, char: str) -> "Cell":
        """Build a cell from a puzzle character."""
        cell = cls()
        if char != GAP:
            changed = cell.try_change_letter(char)
            assert changed, f"Invalid glyph {char!r}"
        return cell

    @property
    def is_interactive(self) -> bool:
        return self.letter is not None

    @property
    def is_blank(self) -> bool:
        return self.letter == BLANK

    @property
    def is_conductor(self) -> bool:
        return self.letter == CONDUCTOR

    @property
    def is_active_conductor(self) -> bool:
        """A conductor that has not been blackened yet."""
        return self.is_conductor and not self.is_blackened

    @property
    def is_done(self) -> bool:
        return self.letter is None or self.is_blackened

    @property
    def is_traversible_for_adjacency(self) -> bool:
        return self.is_done

    @property
    def is_traversible_for_keyword(self) -> bool:
        return self.is_done or self.is_active_conductor

    @property
    def display(self) -> str:
        return self.letter if self.letter is not None else ' '

    def get_letter(self) -> Optional[str]:
        """The keyword letter of this cell; blanks, conductors and gaps have none."""
        if self.letter is None or self.letter in (BLANK, CONDUCTOR):
            return None
        return self.letter

    def get_letter_or_blank(self) -> Optional[str]:
        return self.letter

    def blacken(self) -> None:
        self.is_blackened = True
        self.mark_count += 1

    def mark_path(self) -> None:
        self.is_marked_for_path = True
        self.mark_count += 1

    def try_change_letter(self, char: str) -> bool:
        """
        Rewrite the letter of this cell.

        The gap glyph and anything that is not a puzzle glyph are refused.
        Writing the wildcard glyph makes the cell a wildcard for good.

        Returns:
            True if the letter was changed
        """
        if char == GAP or not is_valid_glyph(char):
            return False
        self.letter = char.upper()
        if self.letter == WILDCARD:
            self.was_ever_wildcard = True
        return True
