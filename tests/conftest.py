"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import json
from typing import Any, Iterator

import httpx
import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base
from src.interaction.session import SessionContext
from src.render.renderer import BoardRenderer
from src.render.scene import Scene
from src.services.game_client import GameServiceClient

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

TEST_SETTINGS = Settings(
    service_url="http://testserver",
    request_timeout_s=1.0,
    database_url=DATABASE_URL,
    default_theme="arial",
    log_level="DEBUG",
)


@pytest.fixture
def db_session_repo() -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


# --- MOCK DEPENDENCIES ----
class MockLabelRepository:
    """Mock the LabelRepository using a dictionary."""

    def __init__(self, labels: dict[str, str] | None = None) -> None:
        self._labels: dict[str, str] = dict(labels or {})

    def get_label(self, key: str) -> str | None:
        return self._labels.get(key)

    def set_label(self, key: str, value: str) -> str:
        self._labels[key] = value
        return value


class FakeGameService:
    """
    Stand-in for the remote game service, used as the handler of an httpx.MockTransport.

    Every request is recorded. Status codes and raw bodies can be overridden per path.
    """

    def __init__(self) -> None:
        self.board: dict[str, Any] = {}
        self.current_player = "W"
        self.move_response: dict[str, Any] = {"board": {}, "gameOver": False}
        self.status_overrides: dict[str, int] = {}
        self.raw_bodies: dict[str, str] = {}
        self.requests: list[httpx.Request] = []
        self.session: SessionContext | None = None
        self.in_flight_seen: list[bool] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.session is not None:
            self.in_flight_seen.append(self.session.exchange_in_flight)

        path = request.url.path
        status = self.status_overrides.get(path, 200)
        if status != 200:
            return httpx.Response(status, text="something went wrong")
        if path in self.raw_bodies:
            return httpx.Response(200, text=self.raw_bodies[path])
        if path == "/board":
            return httpx.Response(200, text=json.dumps(self.board))
        if path == "/currentPlayer":
            return httpx.Response(200, text=self.current_player)
        if path == "/onClick":
            return httpx.Response(200, text=json.dumps(self.move_response))
        if path == "/newGame":
            return httpx.Response(200)
        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def bodies(self, path: str) -> list[str]:
        return [r.content.decode() for r in self.requests if r.url.path == path]


@pytest.fixture
def names() -> MockLabelRepository:
    return MockLabelRepository({"White": "Alice", "Black": "Bob"})


@pytest.fixture
def session() -> SessionContext:
    return SessionContext()


@pytest.fixture
def scene() -> Scene:
    return Scene()


@pytest.fixture
def renderer(scene: Scene, session: SessionContext, names: MockLabelRepository) -> BoardRenderer:
    """Renderer with the empty board already drawn."""
    board_renderer = BoardRenderer(scene, session, names)
    board_renderer.draw_empty_board()
    return board_renderer


@pytest.fixture
def fake_service() -> FakeGameService:
    return FakeGameService()


def make_client(service: FakeGameService) -> GameServiceClient:
    return GameServiceClient.from_settings(TEST_SETTINGS, transport=service.transport)
