"""Paints a Scene into a pygame window and translates window clicks back into board targets."""

from dataclasses import dataclass
from typing import Optional

import pygame

from src.board.square import BOARD_PIXELS
from src.core.shared_types import Side
from src.render.scene import CellElement, GlyphElement, Scene, checker_color

# --- Constants
BOARD_ORIGIN = (20, 20)
PANEL_WIDTH = 260
SCREEN_WIDTH = BOARD_ORIGIN[0] * 3 + BOARD_PIXELS[0] + PANEL_WIDTH
SCREEN_HEIGHT = BOARD_ORIGIN[1] * 2 + BOARD_PIXELS[1]
BACKGROUND = "#312e2b"
TEXT_COLOR = "#eeeeee"
BANNER_SIZE = (420, 120)

# Font lists per theme; pygame tries each name in turn
THEME_FONTS: dict[str, str] = {
    "arial": "arial,dejavusans,segoeuisymbol",
    "serif": "dejavuserif,timesnewroman,segoeuisymbol",
    "mono": "dejavusansmono,couriernew,segoeuisymbol",
}
THEMES = tuple(THEME_FONTS)


@dataclass(frozen=True)
class ClickTarget:
    """What a mouse click landed on."""

    cell: Optional[CellElement] = None
    banner: bool = False


class PygameBoardView:
    def __init__(self, scene: Scene, title: str = "Chess") -> None:
        pygame.init()
        pygame.display.set_caption(title)
        self.scene = scene
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def target_at(self, pos: tuple[int, int]) -> ClickTarget:
        if self.scene.banner.visible and self._banner_rect().collidepoint(pos):
            return ClickTarget(banner=True)
        x, y = pos[0] - BOARD_ORIGIN[0], pos[1] - BOARD_ORIGIN[1]
        return ClickTarget(cell=self.scene.cell_at(x, y))

    def paint(self) -> None:
        self.screen.fill(BACKGROUND)
        for cell in self.scene.cells.values():
            self._paint_cell(cell)
        for glyph in self.scene.pieces:
            self._paint_glyph(glyph, BOARD_ORIGIN)
        self._paint_panel()
        if self.scene.banner.visible:
            self._paint_banner()
        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()

    # -- Internal helpers --
    def _font(self, theme: str, size: int) -> pygame.font.Font:
        key = (theme, size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(THEME_FONTS.get(theme, THEME_FONTS["arial"]), size)
        return self._fonts[key]

    def _board_rect(self, cell: CellElement) -> pygame.Rect:
        r = cell.rect
        return pygame.Rect(r.x + BOARD_ORIGIN[0], r.y + BOARD_ORIGIN[1], r.width, r.height)

    def _paint_cell(self, cell: CellElement) -> None:
        rect = self._board_rect(cell)
        color = pygame.Color(cell.fill)
        if color.a == 255:
            pygame.draw.rect(self.screen, color, rect)
            return
        # Translucent fills sit on top of the checker color
        pygame.draw.rect(self.screen, pygame.Color(checker_color(cell.address)), rect)
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(color)
        self.screen.blit(overlay, rect.topleft)

    def _paint_glyph(self, glyph: GlyphElement, origin: tuple[int, int]) -> None:
        font = self._font(glyph.theme, glyph.font_size)
        center = (origin[0] + glyph.x, origin[1] + glyph.y)
        outline = font.render(glyph.text, True, pygame.Color(glyph.stroke))
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            self.screen.blit(outline, outline.get_rect(center=(center[0] + dx, center[1] + dy)))
        face = font.render(glyph.text, True, pygame.Color(glyph.fill))
        self.screen.blit(face, face.get_rect(center=center))

    def _paint_panel(self) -> None:
        left = BOARD_ORIGIN[0] * 2 + BOARD_PIXELS[0]
        label_font = self._font("arial", 20)

        self.screen.blit(label_font.render("To move:", True, TEXT_COLOR), (left, BOARD_ORIGIN[1]))
        swatch = pygame.Rect(left, BOARD_ORIGIN[1] + 30, 20, 20)
        pygame.draw.rect(self.screen, pygame.Color(self.scene.player.color), swatch)
        pygame.draw.rect(self.screen, TEXT_COLOR, swatch, 1)
        self.screen.blit(
            label_font.render(self.scene.player.name, True, TEXT_COLOR), (left + 30, BOARD_ORIGIN[1] + 28)
        )

        top = BOARD_ORIGIN[1] + 90
        for side in (Side.WHITE, Side.BLACK):
            title = f"Captured {side.display_label.lower()} pieces:"
            self.screen.blit(label_font.render(title, True, TEXT_COLOR), (left, top))
            for glyph in self.scene.captured[side]:
                self._paint_glyph(glyph, (left + 12, top + 45))
            top += 110

        hint = "1-3: theme   N: new game"
        self.screen.blit(self._font("arial", 16).render(hint, True, TEXT_COLOR), (left, SCREEN_HEIGHT - 40))

    def _banner_rect(self) -> pygame.Rect:
        rect = pygame.Rect((0, 0), BANNER_SIZE)
        rect.center = (BOARD_ORIGIN[0] + BOARD_PIXELS[0] // 2, BOARD_ORIGIN[1] + BOARD_PIXELS[1] // 2)
        return rect

    def _paint_banner(self) -> None:
        rect = self._banner_rect()
        pygame.draw.rect(self.screen, "#202020", rect, border_radius=8)
        pygame.draw.rect(self.screen, TEXT_COLOR, rect, 2, border_radius=8)
        text = self._font("arial", 20).render(self.scene.banner.text, True, TEXT_COLOR)
        self.screen.blit(text, text.get_rect(center=(rect.centerx, rect.centery - 15)))
        hint = self._font("arial", 14).render("click to close", True, TEXT_COLOR)
        self.screen.blit(hint, hint.get_rect(center=(rect.centerx, rect.bottom - 20)))
