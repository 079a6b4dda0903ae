"""
Retained-mode description of everything on screen.

The renderer only ever mutates this tree; the pygame view only ever reads it.
Keeps the rendering logic testable without opening a window.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from src.board.square import CellAddress, CellRect
from src.core.shared_types import Side

LIGHT_COLOR = "#f0d9b5"
DARK_COLOR = "#b58863"
SELECTED_COLOR = "#00ff004d"
HIGHLIGHT_COLOR = "#ffff0080"

PIECE_FONT_SIZE = 40
CAPTURED_FONT_SIZE = 24
CAPTURED_SPACING = 26
CAPTURED_PER_ROW = 8
CAPTURED_ROW_HEIGHT = 28

ClickHandler = Callable[[CellAddress], Awaitable[object]]


def checker_color(address: CellAddress) -> str:
    return LIGHT_COLOR if (address.row + address.col) % 2 == 0 else DARK_COLOR


@dataclass
class CellElement:
    address: CellAddress
    rect: CellRect
    fill: str
    on_click: Optional[ClickHandler] = None


@dataclass
class GlyphElement:
    text: str
    x: int
    y: int
    fill: str
    stroke: str
    theme: str
    font_size: int = PIECE_FONT_SIZE


@dataclass
class Banner:
    visible: bool = False
    text: str = ""


@dataclass
class PlayerLabel:
    name: str = "Unknown"
    color: str = "#000000"


@dataclass
class Scene:
    cells: dict[CellAddress, CellElement] = field(default_factory=dict)
    pieces: list[GlyphElement] = field(default_factory=list)
    captured: dict[Side, list[GlyphElement]] = field(
        default_factory=lambda: {Side.WHITE: [], Side.BLACK: []}
    )
    banner: Banner = field(default_factory=Banner)
    player: PlayerLabel = field(default_factory=PlayerLabel)

    def cell_at(self, x: int, y: int) -> CellElement | None:
        """Board-space pixel to the cell drawn there."""
        address = CellAddress.from_point(x, y)
        if address is None:
            return None
        return self.cells.get(address)

    def cell_fills(self) -> dict[CellAddress, str]:
        return {address: cell.fill for address, cell in self.cells.items()}
