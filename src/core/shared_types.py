"""
Type definitions used across layers
"""

from enum import StrEnum


class Side(StrEnum):
    """Side labels exactly as the game service sends them."""

    WHITE = "W"
    BLACK = "B"

    @property
    def display_label(self) -> str:
        """Label used to look up the player's display name ("White" / "Black")."""
        return "White" if self == Side.WHITE else "Black"


class PieceKind(StrEnum):
    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"
