"""
Boundary layer data model(s).

These objects travel between the Remote Sync Client, the Interaction State Machine and the Renderer.
(Decouples the wire format of the game service from what the rendering code needs to know)
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from src.board.square import CellAddress
from src.core.shared_types import Side

# Type aliases to make GameStateUpdate easier to read
SquareName = str
PieceToken = str
# Values come straight off the wire and may be of any JSON type
BoardSnapshot = dict[SquareName, Any]

T = TypeVar("T")


@dataclass(frozen=True)
class MoveCommand:
    """A requested move. Only the game service decides what it means."""

    origin: CellAddress
    destination: CellAddress

    def to_wire(self) -> str:
        """Request body for /onClick, e.g. 'e2e4'."""
        return f"{self.origin.to_algebraic()}{self.destination.to_algebraic()}"

    def is_self_move(self) -> bool:
        return self.origin == self.destination


@dataclass
class GameStateUpdate:
    """
    Everything a single server response can tell the client.

    A field left as None means the response did not report it.
    """

    board: Optional[BoardSnapshot] = None
    highlights: Optional[list[Any]] = None
    winner: Optional[Side] = None
    game_over: bool = False
    captured_white: Optional[list[Any]] = None
    captured_black: Optional[list[Any]] = None

    @property
    def has_captured(self) -> bool:
        return self.captured_white is not None or self.captured_black is not None


@dataclass(frozen=True)
class ExchangeResult(Generic[T]):
    """Outcome of one request/response exchange with the game service."""

    status_code: Optional[int]
    value: Optional[T] = None
    error: Optional[str] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.status_code == 200 and self.error is None
