"""
Transport to the remote game service.

Every call is one request/response exchange and comes back as an ExchangeResult:
transport errors, unexpected status codes and unparseable bodies are logged here and
reported in the result, never raised.
"""

import logging
from typing import Callable, Optional, Self, TypeVar

import httpx
from pydantic import ValidationError

from src.api.models import BoardResponse, GameStateResponse
from src.core.config import Settings
from src.core.exceptions import ResponseFormatError
from src.core.models import ExchangeResult, MoveCommand

log = logging.getLogger(__name__)

BOARD_PATH = "/board"
CURRENT_PLAYER_PATH = "/currentPlayer"
MOVE_PATH = "/onClick"
NEW_GAME_PATH = "/newGame"

T = TypeVar("T")


class GameServiceClient:
    """Thin async wrapper around the four endpoints of the game service."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self.http = http

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> Self:
        http = httpx.AsyncClient(
            base_url=settings.service_url,
            timeout=settings.request_timeout_s,
            transport=transport,
        )
        return cls(http)

    async def aclose(self) -> None:
        await self.http.aclose()

    # -- Endpoints --
    async def get_board(self) -> ExchangeResult[BoardResponse]:
        response = await self._send("GET", BOARD_PATH)
        return self._parse(response, BoardResponse.model_validate_json)

    async def get_current_player(self) -> ExchangeResult[str]:
        response = await self._send("GET", CURRENT_PLAYER_PATH)
        return self._parse(response, _parse_side_label)

    async def post_move(self, command: MoveCommand) -> ExchangeResult[GameStateResponse]:
        response = await self._send(
            "POST",
            MOVE_PATH,
            content=command.to_wire(),
            headers={"Content-Type": "text/plain"},
        )
        return self._parse(response, GameStateResponse.model_validate_json)

    async def new_game(self) -> ExchangeResult[None]:
        response = await self._send("GET", NEW_GAME_PATH)
        return self._parse(response, lambda _body: None)

    # -- Internal helpers --
    async def _send(self, method: str, path: str, **kwargs) -> Optional[httpx.Response]:
        log.debug("%s %s", method, path)
        try:
            response = await self.http.request(method, path, **kwargs)
        except httpx.HTTPError as err:
            log.warning("%s %s failed: %s", method, path, err)
            return None
        if response.status_code != 200:
            log.warning("%s %s returned status %d", method, path, response.status_code)
        return response

    def _parse(
        self, response: Optional[httpx.Response], parser: Callable[[str], T]
    ) -> ExchangeResult[T]:
        if response is None:
            return ExchangeResult(status_code=None, error="no response from game service")
        if response.status_code != 200:
            return ExchangeResult(
                status_code=response.status_code,
                error=f"unexpected status {response.status_code}",
            )
        try:
            value = parser(response.text)
        except (ValidationError, ResponseFormatError) as err:
            log.error("Could not parse response from %s: %s", response.request.url, err)
            return ExchangeResult(status_code=response.status_code, error=str(err))
        return ExchangeResult(status_code=response.status_code, value=value)


def _parse_side_label(body: str) -> str:
    label = body.strip().strip('"')
    if not label:
        raise ResponseFormatError("Empty current player response.")
    return label
