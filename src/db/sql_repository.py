"""Implementation of (Label)Repository using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.schema import DBLabel


class SQLLabelRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_label(self, key: str) -> str | None:
        label_db = self._fetch_label(key)
        if label_db:
            return label_db.value
        return None

    def set_label(self, key: str, value: str) -> str:
        label_db = self._fetch_label(key)
        if label_db:
            label_db.value = value
        else:
            label_db = DBLabel(key=key, value=value)
            self.db.add(label_db)
        self.db.commit()
        self.db.refresh(label_db)
        return label_db.value

    def _fetch_label(self, key: str) -> DBLabel | None:
        query = select(DBLabel).where(DBLabel.key == key)
        return self.db.scalar(query)
