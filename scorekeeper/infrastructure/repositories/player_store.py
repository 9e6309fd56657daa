"""Player store contract shared by every persistence backend."""
from abc import ABC, abstractmethod

from scorekeeper.domain.league import League


class CorruptStoreError(Exception):
    """Backing stream does not contain a decodable League."""

    def __init__(self, stream_name: str, reason: Exception):
        self.stream_name = stream_name
        self.reason = reason
        super().__init__(f"problem loading player store from {stream_name}: {reason}")


class PlayerStore(ABC):
    """Score lookup, win recording and league retrieval."""

    @abstractmethod
    def get_player_score(self, name: str) -> int:
        """Current wins for `name`, 0 when the player is unknown."""

    @abstractmethod
    def record_win(self, name: str) -> None:
        """Add one win, creating the player with 1 win if needed."""

    @abstractmethod
    def get_league(self) -> League:
        """All players, sorted by wins descending."""
