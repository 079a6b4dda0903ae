"""Unit tests for src/render/pygame_view.py, using SDL's dummy video driver (no window)"""

from typing import Iterator

import pytest

from src.board.square import CELL_SIZE, CellAddress
from src.core.shared_types import Side
from src.render.pygame_view import BOARD_ORIGIN, PygameBoardView
from src.render.renderer import BoardRenderer
from src.render.scene import Scene


@pytest.fixture
def view(monkeypatch: pytest.MonkeyPatch, renderer: BoardRenderer, scene: Scene) -> Iterator[PygameBoardView]:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    board_view = PygameBoardView(scene)
    try:
        yield board_view
    finally:
        board_view.close()


def test_click_on_board_targets_the_cell(view: PygameBoardView) -> None:
    # Middle of the bottom-left cell
    pos = (BOARD_ORIGIN[0] + CELL_SIZE // 2, BOARD_ORIGIN[1] + 7 * CELL_SIZE + CELL_SIZE // 2)
    target = view.target_at(pos)
    assert target.cell is not None
    assert target.cell.address == CellAddress.from_algebraic("a1")
    assert not target.banner


def test_click_outside_the_board(view: PygameBoardView) -> None:
    target = view.target_at((0, 0))
    assert target.cell is None
    assert not target.banner


def test_click_on_visible_banner(view: PygameBoardView, renderer: BoardRenderer) -> None:
    renderer.show_outcome_banner(Side.WHITE)
    center = (BOARD_ORIGIN[0] + 4 * CELL_SIZE, BOARD_ORIGIN[1] + 4 * CELL_SIZE)
    assert view.target_at(center).banner

    renderer.hide_outcome_banner()
    assert not view.target_at(center).banner


def test_paint_full_scene(view: PygameBoardView, renderer: BoardRenderer) -> None:
    renderer.draw_pieces({"a1": "WR", "e8": "BK"})
    renderer.draw_highlights(["e4"])
    renderer.draw_captured(["WP"], ["BQ"])
    renderer.show_current_player(Side.BLACK)
    renderer.show_outcome_banner(Side.BLACK)
    view.paint()
