"""Unit tests for src/services/game_client.py"""

import asyncio

import httpx
from conftest import TEST_SETTINGS, FakeGameService, make_client

from src.board.square import CellAddress
from src.core.models import MoveCommand
from src.services.game_client import GameServiceClient


def run(coro):
    return asyncio.run(coro)


async def call(service: FakeGameService, method: str, *args):
    client = make_client(service)
    try:
        return await getattr(client, method)(*args)
    finally:
        await client.aclose()


# --- GET /board ---
def test_get_board(fake_service: FakeGameService) -> None:
    fake_service.board = {"a1": "WR", "e1": "WK"}
    result = run(call(fake_service, "get_board"))
    assert result.ok
    assert result.status_code == 200
    assert result.value.root == {"a1": "WR", "e1": "WK"}
    assert fake_service.requests[0].method == "GET"


def test_get_board_with_unparseable_body(fake_service: FakeGameService) -> None:
    fake_service.raw_bodies["/board"] = "<html>oops</html>"
    result = run(call(fake_service, "get_board"))
    assert not result.ok
    assert result.status_code == 200
    assert result.value is None
    assert result.error


def test_get_board_with_error_status(fake_service: FakeGameService) -> None:
    fake_service.status_overrides["/board"] = 500
    result = run(call(fake_service, "get_board"))
    assert not result.ok
    assert result.status_code == 500
    assert result.error == "unexpected status 500"


def test_transport_failure_is_reported_not_raised() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = GameServiceClient.from_settings(TEST_SETTINGS, transport=httpx.MockTransport(refuse))

    async def scenario():
        try:
            return await client.get_board()
        finally:
            await client.aclose()

    result = run(scenario())
    assert not result.ok
    assert result.status_code is None


# --- GET /currentPlayer ---
def test_get_current_player_is_plain_text(fake_service: FakeGameService) -> None:
    fake_service.current_player = "B\n"
    result = run(call(fake_service, "get_current_player"))
    assert result.ok
    assert result.value == "B"


def test_get_current_player_empty_body(fake_service: FakeGameService) -> None:
    fake_service.current_player = ""
    result = run(call(fake_service, "get_current_player"))
    assert not result.ok
    assert result.status_code == 200


# --- POST /onClick ---
def test_post_move_sends_plain_text_command(fake_service: FakeGameService) -> None:
    fake_service.move_response = {"board": {"e4": "WP"}, "possibleMoves": ["e5", "d5"], "gameOver": False}
    command = MoveCommand(CellAddress.from_algebraic("e2"), CellAddress.from_algebraic("e4"))

    result = run(call(fake_service, "post_move", command))

    request = fake_service.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/onClick"
    assert request.headers["Content-Type"] == "text/plain"
    assert request.content == b"e2e4"
    assert result.ok
    assert result.value.board == {"e4": "WP"}
    assert result.value.highlights == ["e5", "d5"]


def test_post_move_with_error_status(fake_service: FakeGameService) -> None:
    fake_service.status_overrides["/onClick"] = 400
    command = MoveCommand(CellAddress.from_algebraic("e2"), CellAddress.from_algebraic("e2"))
    result = run(call(fake_service, "post_move", command))
    assert result.status_code == 400
    assert result.value is None


# --- GET /newGame ---
def test_new_game(fake_service: FakeGameService) -> None:
    result = run(call(fake_service, "new_game"))
    assert result.ok
    assert fake_service.paths() == ["/newGame"]
