"""Defines the pieces the client knows how to draw"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidPieceError
from src.core.shared_types import PieceKind, Side

TOKEN_TO_KIND: dict[str, PieceKind] = {kind.value: kind for kind in PieceKind}

# Solid glyphs so the fill color carries the side
KIND_TO_GLYPH: dict[PieceKind, str] = {
    PieceKind.KING: "♚",
    PieceKind.QUEEN: "♛",
    PieceKind.ROOK: "♜",
    PieceKind.BISHOP: "♝",
    PieceKind.KNIGHT: "♞",
    PieceKind.PAWN: "♟",
}

SIDE_FILL: dict[Side, str] = {Side.WHITE: "#FFFFFF", Side.BLACK: "#000000"}
SIDE_STROKE: dict[Side, str] = {Side.WHITE: "#000000", Side.BLACK: "#FFFFFF"}


@dataclass(frozen=True)
class Piece:
    side: Side
    kind: PieceKind

    @classmethod
    def from_token(cls, token: object) -> Self:
        """Parse a two character board value: side letter, then kind letter ('WR', 'BP')."""
        if not isinstance(token, str):
            raise InvalidPieceError(f"Piece value {token!r} is not a string.")
        if len(token) < 2:
            raise InvalidPieceError(f"Piece value {token!r} is too short.")
        try:
            side = Side(token[0].upper())
        except ValueError as err:
            raise InvalidPieceError(f"Unknown side in piece value {token!r}.") from err
        kind = TOKEN_TO_KIND.get(token[1].upper())
        if kind is None:
            raise InvalidPieceError(f"Unknown piece kind in piece value {token!r}.")
        return cls(side, kind)

    def to_token(self) -> str:
        return f"{self.side.value}{self.kind.value}"

    @property
    def glyph(self) -> str:
        return KIND_TO_GLYPH[self.kind]

    @property
    def fill(self) -> str:
        return SIDE_FILL[self.side]

    @property
    def stroke(self) -> str:
        return SIDE_STROKE[self.side]


def display_color(side: Side | None) -> str:
    """Swatch color for a side; anything unknown is drawn black."""
    return SIDE_FILL[side] if side is not None else SIDE_FILL[Side.BLACK]
