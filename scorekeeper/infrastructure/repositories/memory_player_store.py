"""Process-local player store (dict + lock)."""
import threading
from typing import Dict

from scorekeeper.domain.league import League, Player
from scorekeeper.infrastructure.repositories.player_store import PlayerStore


class InMemoryPlayerStore(PlayerStore):
    """Win counts kept in memory for the lifetime of the instance."""

    def __init__(self):
        self._scores: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get_player_score(self, name: str) -> int:
        with self._lock:
            return self._scores.get(name, 0)

    def record_win(self, name: str) -> None:
        with self._lock:
            self._scores[name] = self._scores.get(name, 0) + 1

    def get_league(self) -> League:
        with self._lock:
            players = [Player(name, wins) for name, wins in self._scores.items()]
        return League(players).sort()
