"""
Board Renderer: draws the board, pieces, highlights, captured pieces and banners into a Scene.

Knows nothing about the rules of the game. Every entry coming from the service is checked on its own:
a bad entry gets logged and skipped, the rest is still drawn.
"""

import logging
from typing import Iterable, Optional

from src.board.pieces import Piece, display_color
from src.board.square import CellAddress, all_addresses
from src.core.exceptions import InvalidAddressError, InvalidPieceError
from src.core.models import BoardSnapshot, PieceToken, SquareName
from src.core.shared_types import Side
from src.db.repository import LabelRepository
from src.interaction.session import SessionContext
from src.render.scene import (
    CAPTURED_FONT_SIZE,
    CAPTURED_PER_ROW,
    CAPTURED_ROW_HEIGHT,
    CAPTURED_SPACING,
    HIGHLIGHT_COLOR,
    CellElement,
    ClickHandler,
    GlyphElement,
    Scene,
    checker_color,
)

log = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"


class BoardRenderer:
    def __init__(
        self, scene: Scene, session: SessionContext, names: LabelRepository
    ) -> None:
        self.scene = scene
        self.session = session
        self.names = names
        self._highlighted: set[CellAddress] = set()

    # --- Board cells ---
    def draw_empty_board(self, on_click: Optional[ClickHandler] = None) -> None:
        """(Re)build all 64 cells. Previous cells and their handlers are dropped."""
        self.scene.cells.clear()
        self._highlighted.clear()
        for address in all_addresses():
            self.scene.cells[address] = CellElement(
                address=address,
                rect=address.to_rect(),
                fill=checker_color(address),
                on_click=on_click,
            )

    def set_cell_color(self, address: CellAddress, color: str) -> None:
        cell = self.scene.cells.get(address)
        if cell is None:
            log.error("No cell drawn at %s", address)
            return
        cell.fill = color

    def reset_cell_color(self, address: CellAddress) -> None:
        self._highlighted.discard(address)
        self.set_cell_color(address, checker_color(address))

    # --- Pieces ---
    def clear_pieces(self) -> None:
        self.scene.pieces.clear()

    def draw_pieces(self, snapshot: BoardSnapshot) -> None:
        self.clear_pieces()
        for square_name, value in snapshot.items():
            try:
                address = CellAddress.from_algebraic(square_name)
                piece = Piece.from_token(value)
            except (InvalidAddressError, InvalidPieceError) as err:
                log.error("Skipping board entry %r: %r (%s)", square_name, value, err)
                continue
            x, y = address.to_rect().center
            self.scene.pieces.append(self._glyph(piece, x, y))
            log.debug("Drew %s at %s", piece.to_token(), address)

    # --- Highlights ---
    def draw_highlights(self, squares: Iterable[SquareName]) -> None:
        """Replace the previously highlighted cells with the given ones. Pieces stay as they are."""
        for address in list(self._highlighted):
            self.reset_cell_color(address)
        for square_name in squares:
            try:
                address = CellAddress.from_algebraic(square_name)
            except InvalidAddressError as err:
                log.error("Skipping highlight %r (%s)", square_name, err)
                continue
            if address not in self.scene.cells:
                log.error("Cannot highlight %s: board not drawn", address)
                continue
            self.set_cell_color(address, HIGHLIGHT_COLOR)
            self._highlighted.add(address)

    @property
    def highlighted(self) -> set[CellAddress]:
        return set(self._highlighted)

    # --- Captured pieces ---
    def draw_captured(
        self, white: Iterable[PieceToken], black: Iterable[PieceToken]
    ) -> None:
        for side, tokens in ((Side.WHITE, white), (Side.BLACK, black)):
            glyphs: list[GlyphElement] = []
            for token in tokens:
                try:
                    piece = Piece.from_token(token)
                except InvalidPieceError as err:
                    log.error("Skipping captured piece %r (%s)", token, err)
                    continue
                row, col = divmod(len(glyphs), CAPTURED_PER_ROW)
                glyph = self._glyph(piece, col * CAPTURED_SPACING, row * CAPTURED_ROW_HEIGHT)
                glyph.font_size = CAPTURED_FONT_SIZE
                glyphs.append(glyph)
            self.scene.captured[side] = glyphs

    # --- Banner and player display ---
    def show_outcome_banner(self, winner: Optional[Side]) -> None:
        colour_name = winner.display_label if winner else UNKNOWN_NAME
        player_name = self._display_name(winner)
        self.scene.banner.text = f"{player_name} ({colour_name}) has won the Game!"
        self.scene.banner.visible = True
        log.info("Game over: %s", self.scene.banner.text)

    def hide_outcome_banner(self) -> None:
        self.scene.banner.visible = False

    def show_current_player(self, side: Optional[Side]) -> None:
        self.scene.player.name = self._display_name(side)
        self.scene.player.color = display_color(side)

    # -- Internal helpers --
    def _display_name(self, side: Optional[Side]) -> str:
        if side is None:
            return UNKNOWN_NAME
        return self.names.get_label(side.display_label) or UNKNOWN_NAME

    def _glyph(self, piece: Piece, x: int, y: int) -> GlyphElement:
        return GlyphElement(
            text=piece.glyph,
            x=x,
            y=y,
            fill=piece.fill,
            stroke=piece.stroke,
            theme=self.session.theme,
        )
