"""
Application shell: wires renderer, state machine and sync client together and runs the pygame loop.

Usage: chess-client --service-url http://localhost:8080 --white-name Alice --black-name Bob
"""

import argparse
import asyncio
import logging
from typing import Callable, Optional, Sequence

import httpx
import pygame

from src.board.square import CellAddress
from src.core.config import SETTINGS, Settings, configure_logging
from src.core.shared_types import Side
from src.db.database import make_session_factory
from src.db.repository import LabelRepository
from src.db.sql_repository import SQLLabelRepository
from src.interaction.session import SessionContext
from src.interaction.state_machine import InteractionStateMachine
from src.render.pygame_view import THEMES, PygameBoardView
from src.render.renderer import BoardRenderer
from src.render.scene import Scene
from src.services.game_client import GameServiceClient
from src.services.sync_service import RemoteSync

log = logging.getLogger(__name__)

FPS = 30


class ChessClientApp:
    """The entry points a page would expose: load, theme change, cell click, popup dismiss, new game."""

    def __init__(
        self,
        settings: Settings,
        names: LabelRepository,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.session = SessionContext(theme=settings.default_theme)
        self.scene = Scene()
        self.renderer = BoardRenderer(self.scene, self.session, names)
        self.client = GameServiceClient.from_settings(settings, transport=transport)
        self.sync = RemoteSync(self.client, self.renderer, self.session)
        self.machine = InteractionStateMachine(
            self.session, self.renderer, self.sync.submit_move
        )

    async def page_loaded(self) -> None:
        log.info("Loading board")
        self.renderer.draw_empty_board(on_click=self.cell_clicked)
        await self.sync.fetch_board()
        await self.sync.fetch_current_player()

    async def change_theme(self, theme: str) -> None:
        if self._input_blocked("theme change"):
            return
        self.session.theme = theme
        await self.sync.fetch_board()

    async def cell_clicked(self, address: CellAddress) -> None:
        await self.machine.click(address)

    def dismiss_popup(self) -> None:
        self.renderer.hide_outcome_banner()

    async def start_new_game(self) -> None:
        if self._input_blocked("new game"):
            return
        self.machine.clear_selection()
        await self.sync.new_game()

    async def aclose(self) -> None:
        await self.client.aclose()

    def _input_blocked(self, action: str) -> bool:
        """Same rule as for clicks: nothing new starts while an exchange is running."""
        if self.session.exchange_in_flight:
            log.debug("Ignoring %s: waiting for the game service", action)
            return True
        return False


def _finish_task(pending: set[asyncio.Task]) -> Callable[[asyncio.Task], None]:
    """Done callback for scheduled input tasks: forget the task and log anything it raised."""

    def finish(task: asyncio.Task) -> None:
        pending.discard(task)
        if task.cancelled():
            return
        err = task.exception()
        if err is not None:
            log.error("Input task failed", exc_info=err)

    return finish


async def run_window(app: ChessClientApp) -> None:
    """Cooperative loop: one frame per tick, clicks become tasks on the same event loop."""
    view = PygameBoardView(app.scene)
    pending: set[asyncio.Task] = set()

    def schedule(coro) -> None:
        task = asyncio.create_task(coro)
        pending.add(task)
        task.add_done_callback(_finish_task(pending))

    running = True
    try:
        await app.page_loaded()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    target = view.target_at(event.pos)
                    if target.banner:
                        app.dismiss_popup()
                    elif target.cell is not None and target.cell.on_click is not None:
                        schedule(target.cell.on_click(target.cell.address))
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        app.dismiss_popup()
                    elif event.key == pygame.K_n:
                        schedule(app.start_new_game())
                    elif pygame.K_1 <= event.key < pygame.K_1 + len(THEMES):
                        schedule(app.change_theme(THEMES[event.key - pygame.K_1]))
            view.paint()
            await asyncio.sleep(1 / FPS)
    finally:
        for task in pending:
            task.cancel()
        view.close()
        await app.aclose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chess-client", description="Board client for a remote chess service.")
    parser.add_argument("--service-url", help="Base URL of the game service")
    parser.add_argument("--database-url", help="SQLAlchemy URL of the name store")
    parser.add_argument("--theme", help="Initial piece theme")
    parser.add_argument("--white-name", help="Display name stored for the White player")
    parser.add_argument("--black-name", help="Display name stored for the Black player")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = SETTINGS.with_overrides(
        service_url=args.service_url,
        database_url=args.database_url,
        default_theme=args.theme,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level)

    session_factory = make_session_factory(settings.database_url)
    with session_factory() as db:
        names = SQLLabelRepository(db)
        for side, name in ((Side.WHITE, args.white_name), (Side.BLACK, args.black_name)):
            if name:
                names.set_label(side.display_label, name)

        app = ChessClientApp(settings, names)
        asyncio.run(run_window(app))


if __name__ == "__main__":
    main()
