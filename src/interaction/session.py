"""Session-scoped client state: the pending selection, the active theme, and whether an exchange is running."""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from src.board.square import CellAddress

DEFAULT_THEME = "arial"


class SelectionPhase(Enum):
    IDLE = auto()
    ARMED = auto()


@dataclass
class SessionContext:
    theme: str = DEFAULT_THEME
    selection: Optional[CellAddress] = None
    exchange_in_flight: bool = False

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.IDLE if self.selection is None else SelectionPhase.ARMED

    @contextmanager
    def exchange(self) -> Iterator[None]:
        """Mark an exchange with the game service as running. Nested exchanges keep the flag up."""
        previous = self.exchange_in_flight
        self.exchange_in_flight = True
        try:
            yield
        finally:
            self.exchange_in_flight = previous
