"""Orchestration of one user action: game service exchange -> parsed state -> renderer (and the reverse direction)."""

import logging

from src.api.models import BoardResponse, GameStateResponse, side_from_label
from src.core.models import ExchangeResult, MoveCommand
from src.interaction.session import SessionContext
from src.render.renderer import BoardRenderer
from src.services.game_client import GameServiceClient
from src.services.reconcile import apply_update

log = logging.getLogger(__name__)


class RemoteSync:
    """Keeps the screen in line with the authoritative state held by the game service."""

    def __init__(
        self,
        client: GameServiceClient,
        renderer: BoardRenderer,
        session: SessionContext,
    ) -> None:
        self.client = client
        self.renderer = renderer
        self.session = session

    async def fetch_board(self) -> ExchangeResult[BoardResponse]:
        """Reload piece placement only. On failure the board stays as drawn."""
        with self.session.exchange():
            result = await self.client.get_board()
        if result.ok and result.value is not None:
            apply_update(self.renderer, result.value.to_update())
        else:
            log.warning("Board not updated: %s", result.error)
        return result

    async def fetch_current_player(self) -> ExchangeResult[str]:
        with self.session.exchange():
            result = await self.client.get_current_player()
        if not result.ok:
            log.warning("Current player not updated: %s", result.error)
            return result

        side = side_from_label(result.value)
        if side is None:
            log.error("Unknown side label from service: %r", result.value)
        self.renderer.show_current_player(side)
        return result

    async def submit_move(self, command: MoveCommand) -> ExchangeResult[GameStateResponse]:
        """
        Send a move and reconcile against the full game state that comes back.

        On failure nothing on screen changes (board, captured lists, outcome, turn display).
        """
        with self.session.exchange():
            result = await self.client.post_move(command)
            if not result.ok or result.value is None:
                log.warning("Move %s not applied: %s", command.to_wire(), result.error)
                return result

            apply_update(self.renderer, result.value.to_update())
            await self.fetch_current_player()
        return result

    async def new_game(self) -> ExchangeResult[None]:
        with self.session.exchange():
            result = await self.client.new_game()
            if not result.ok:
                log.warning("New game not started: %s", result.error)
                return result

            self.renderer.hide_outcome_banner()
            self.renderer.draw_highlights([])
            self.renderer.draw_captured([], [])
            await self.fetch_board()
            await self.fetch_current_player()
        return result
