"""
Two-click move selection.

IDLE --click--> ARMED (first cell highlighted)
ARMED --click--> IDLE, and the (first, second) pair is handed to the game service as a MoveCommand.

There is no way to un-arm without completing a move: the second click is always sent,
even when it is the same cell as the first (the service decides what that means).
"""

import logging
from typing import Awaitable, Callable, Optional

from src.board.square import CellAddress
from src.core.models import MoveCommand
from src.interaction.session import SelectionPhase, SessionContext
from src.render.renderer import BoardRenderer
from src.render.scene import SELECTED_COLOR

log = logging.getLogger(__name__)

SubmitMove = Callable[[MoveCommand], Awaitable[object]]


class InteractionStateMachine:
    def __init__(
        self, session: SessionContext, renderer: BoardRenderer, submit: SubmitMove
    ) -> None:
        self.session = session
        self.renderer = renderer
        self._submit = submit

    @property
    def phase(self) -> SelectionPhase:
        return self.session.phase

    async def click(self, address: CellAddress) -> Optional[MoveCommand]:
        """Process one click. Returns the MoveCommand when the click completed one."""
        if self.session.exchange_in_flight:
            log.debug("Ignoring click on %s: waiting for the game service", address)
            return None

        if self.session.selection is None:
            self.session.selection = address
            self.renderer.set_cell_color(address, SELECTED_COLOR)
            log.debug("Selected %s", address)
            return None

        origin = self.session.selection
        self.renderer.reset_cell_color(origin)
        self.session.selection = None

        command = MoveCommand(origin=origin, destination=address)
        log.info("Submitting move %s", command.to_wire())
        await self._submit(command)
        return command

    def clear_selection(self) -> None:
        """Drop a pending selection (used when a new game is started)."""
        if self.session.selection is not None:
            self.renderer.reset_cell_color(self.session.selection)
            self.session.selection = None
