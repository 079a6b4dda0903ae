"""Unit tests for src/db/sql_repository.py"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.schema import DBLabel
from src.db.sql_repository import SQLLabelRepository


def test_set_and_get_label(db_session_repo: Session) -> None:
    repo = SQLLabelRepository(db_session_repo)
    assert repo.set_label("White", "Alice") == "Alice"
    assert repo.get_label("White") == "Alice"


def test_get_unknown_label(db_session_repo: Session) -> None:
    """Should return None if the key does not match anything in the database."""
    repo = SQLLabelRepository(db_session_repo)
    assert repo.get_label("Black") is None

    repo.set_label("White", "Alice")
    assert repo.get_label("Black") is None


def test_overwrite_label(db_session_repo: Session) -> None:
    """Setting an existing key replaces the value instead of adding a second row."""
    repo = SQLLabelRepository(db_session_repo)
    repo.set_label("White", "Alice")
    repo.set_label("White", "Carol")
    assert repo.get_label("White") == "Carol"
    rows = db_session_repo.scalars(select(DBLabel)).all()
    assert len(rows) == 1

