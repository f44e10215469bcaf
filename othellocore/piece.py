"""The two piece colors."""

from __future__ import annotations

from enum import IntEnum

from .constants import BLACK, EMPTY, WHITE


class Piece(IntEnum):
    """A piece color.

    Values are the board cell codes, so the opponent of a piece is its negation.
    """

    BLACK = BLACK
    WHITE = WHITE

    def opponent(self) -> Piece:
        """Return the other color."""
        return Piece(-self.value)

    def __invert__(self) -> Piece:  # type: ignore[override]
        return self.opponent()

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def to_json(self) -> str:
        """Serialize as ``"Black"`` or ``"White"``."""
        return str(self)

    @classmethod
    def from_json(cls, value: str) -> Piece:
        """Parse ``"Black"`` or ``"White"`` (case-insensitive)."""
        try:
            return cls[value.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown piece {value!r}, expected 'Black' or 'White'.") from None

    @classmethod
    def from_cell(cls, code: int) -> Piece | None:
        """Convert a stored cell code to a piece, or None for an empty cell."""
        if code == EMPTY:
            return None
        return cls(int(code))
