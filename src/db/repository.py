"""Protocol for the labeled key-value store holding player display names (keyed by "White" / "Black")."""

from typing import Protocol


class LabelRepository(Protocol):
    """Persistence layer orchestration"""

    def get_label(self, key: str) -> str | None:
        """Value stored under key, if a record exists."""
        ...

    def set_label(self, key: str, value: str) -> str:
        """Create or overwrite the value stored under key."""
        ...
