"""Response models for the remote game service"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from src.core.models import BoardSnapshot, GameStateUpdate
from src.core.shared_types import Side

SquareName = str
# Entries are checked one by one when drawn, so a single bad value never rejects the whole body
RawEntry = Any


def side_from_label(label: Optional[str]) -> Optional[Side]:
    """'W' / 'B' (as sent by the service) to a Side. Anything else is unknown."""
    if label is None:
        return None
    try:
        return Side(label.strip().upper())
    except ValueError:
        return None


# --- RESPONSE MODELS ---
class BoardResponse(RootModel[dict[SquareName, RawEntry]]):
    """Body of GET /board: square name -> piece value. Values are checked entry by entry when drawn."""

    def to_update(self) -> GameStateUpdate:
        # Board only: every other display element is left alone for this call
        return GameStateUpdate(board=dict(self.root))


class GameStateResponse(BaseModel):
    """Body of POST /onClick."""

    model_config = ConfigDict(populate_by_name=True)

    board: Optional[BoardSnapshot] = None
    possible_moves: Optional[list[RawEntry]] = Field(default=None, alias="possibleMoves")
    highlighted_polygons: Optional[list[RawEntry]] = Field(
        default=None, alias="highlightedPolygons"
    )
    winner: Optional[str] = None
    game_over: bool = Field(default=False, alias="gameOver")
    eliminated_white_pieces: Optional[list[RawEntry]] = Field(
        default=None, alias="eliminatedWhitePieces"
    )
    eliminated_black_pieces: Optional[list[RawEntry]] = Field(
        default=None, alias="eliminatedBlackPieces"
    )

    @field_validator("game_over", mode="before")
    @classmethod
    def validate_game_over(cls, value: Optional[bool]) -> bool:
        # Some service versions send null before the game has been decided
        return bool(value) if value is not None else False

    @property
    def highlights(self) -> Optional[list[RawEntry]]:
        """Two names have been used for the same field; possibleMoves wins when both are sent."""
        if self.possible_moves is not None:
            return self.possible_moves
        return self.highlighted_polygons

    def to_update(self) -> GameStateUpdate:
        return GameStateUpdate(
            board=self.board,
            highlights=self.highlights,
            winner=side_from_label(self.winner),
            game_over=self.game_over,
            captured_white=self.eliminated_white_pieces,
            captured_black=self.eliminated_black_pieces,
        )
