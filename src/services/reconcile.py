"""Re-draw everything the service reported in one response, in a fixed order."""

import logging

from src.core.models import GameStateUpdate
from src.render.renderer import BoardRenderer

log = logging.getLogger(__name__)


def apply_update(renderer: BoardRenderer, update: GameStateUpdate) -> None:
    """
    Full replace of the visible game state.

    Order matters:
        1. outcome banner (before anything on the board changes)
        2. clear pieces
        3. pieces, if a board was sent
        4. highlights on top of the fresh pieces
        5. captured-piece lists
    ---
    NOTE a response without a board leaves the pieces cleared until the next successful fetch.
    """
    if update.game_over:
        renderer.show_outcome_banner(update.winner)

    renderer.clear_pieces()

    if update.board is not None:
        renderer.draw_pieces(update.board)

    if update.highlights is not None:
        renderer.draw_highlights(update.highlights)

    if update.has_captured:
        renderer.draw_captured(update.captured_white or [], update.captured_black or [])

    log.debug("Applied update (game over=%s)", update.game_over)
