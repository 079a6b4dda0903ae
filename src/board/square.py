"""
A cell on the board, and the fixed mapping between cells and pixels.

(placed in its own module as the renderer, the state machine and the pygame view all need it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidAddressError

# Board is always 8x8 for this client, but keep the dimensions in one place
BOARD_DIMENSIONS = (8, 8)
CELL_SIZE = 60
BOARD_PIXELS = (BOARD_DIMENSIONS[0] * CELL_SIZE, BOARD_DIMENSIONS[1] * CELL_SIZE)


@dataclass(frozen=True)
class CellRect:
    x: int
    y: int
    width: int
    height: int

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.width // 2, self.y + self.height // 2


@dataclass(frozen=True)
class CellAddress:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> CellAddress:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        if not isinstance(sq, str) or len(sq) != 2:
            raise InvalidAddressError(f"Cannot interpret {sq!r} as a cell address.")
        if not (sq[0].isalpha() and sq[1].isdigit()):
            raise InvalidAddressError(f"Cannot interpret {sq!r} as a cell address.")
        address = cls(ord(sq[0].lower()) - ord("a") + 1, int(sq[1]))
        if not address.is_within_bounds():
            raise InvalidAddressError(f"Cell {sq!r} is not on the board.")
        return address

    @classmethod
    def from_grid(cls, col: int, row: int) -> CellAddress:
        """Screen grid indices (col 0 = file a, row 0 = rank 8) to an address."""
        return cls(col + 1, BOARD_DIMENSIONS[1] - row)

    @classmethod
    def from_point(cls, x: int, y: int) -> CellAddress | None:
        """Pixel inside the board to the cell under it. None when the point is off the board."""
        if not (0 <= x < BOARD_PIXELS[0] and 0 <= y < BOARD_PIXELS[1]):
            return None
        return cls.from_grid(x // CELL_SIZE, y // CELL_SIZE)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    @property
    def col(self) -> int:
        return self.file - 1

    @property
    def row(self) -> int:
        return BOARD_DIMENSIONS[1] - self.rank

    def to_rect(self) -> CellRect:
        return CellRect(self.col * CELL_SIZE, self.row * CELL_SIZE, CELL_SIZE, CELL_SIZE)

    def __str__(self) -> str:
        return self.to_algebraic()


def all_addresses() -> list[CellAddress]:
    """Every cell, in screen order (top-left to bottom-right)."""
    return [
        CellAddress.from_grid(col, row)
        for row in range(BOARD_DIMENSIONS[1])
        for col in range(BOARD_DIMENSIONS[0])
    ]
