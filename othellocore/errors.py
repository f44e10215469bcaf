"""Errors raised when a placement breaks the rules of the game.

Every error is a :class:`ValueError` and carries the offending coordinate, or
for :class:`Turn` the offending piece. Errors compare equal by type and
payload and convert to and from a plain tagged dict, e.g.
``{"type": "Occupied", "x": 3, "y": 3}``.
"""

from __future__ import annotations

from typing import Any

from .piece import Piece


class PlaceError(ValueError):
    """Base class for illegal placements."""

    registry: dict[str, type[PlaceError]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        PlaceError.registry[cls.__name__] = cls

    def _payload(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged-dict form of the error."""
        return {"type": type(self).__name__, **self._payload()}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> PlaceError:
        """Rebuild an error from :meth:`to_dict` output."""
        kind = data.get("type")
        if kind not in PlaceError.registry:
            raise ValueError(f"Unknown place error type {kind!r}.")
        error_cls = PlaceError.registry[kind]
        try:
            if error_cls is Turn:
                return Turn(Piece.from_json(data["piece"]))
            return error_cls(int(data["x"]), int(data["y"]))  # type: ignore[call-arg]
        except KeyError as e:
            raise ValueError(f"Place error {kind!r} is missing field {e.args[0]!r}.") from None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self._payload().values()))

    def __repr__(self) -> str:
        args = ", ".join(str(v) for v in self._payload().values())
        return f"{type(self).__name__}({args})"


class _SquareError(PlaceError):
    """An error about one board square."""

    message = "board square ({x}, {y}) is invalid"

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(self.message.format(x=x, y=y))

    def _payload(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


class OutOfBounds(_SquareError):
    message = "board square ({x}, {y}) is out of bounds"


class Occupied(_SquareError):
    message = "board square ({x}, {y}) is occupied"


class NotAdjacent(_SquareError):
    message = "board square ({x}, {y}) is not adjacent to any other piece"


class NoFlips(_SquareError):
    message = "no pieces were flipped from board square ({x}, {y})"


class Turn(PlaceError):
    """The piece played is not the side due to move."""

    def __init__(self, piece: Piece) -> None:
        self.piece = Piece(piece)
        super().__init__(f"it is not {self.piece}'s turn")

    def _payload(self) -> dict[str, Any]:
        return {"piece": self.piece.to_json()}


# _SquareError is an implementation helper, not a wire type
del PlaceError.registry["_SquareError"]
