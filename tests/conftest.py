"""
Shared pytest fixtures for the scorekeeper test suite.

Strategy:
- Domain tests: pure in-memory, zero I/O.
- Store tests: real temp files (tmp_path) and io.BytesIO streams.
- API tests: FastAPI TestClient over a stub store or a file-backed store.
"""
import os
import pytest

from scorekeeper.domain.league import League, Player
from scorekeeper.infrastructure.repositories.player_store import PlayerStore

# ---------------------------------------------------------------------------
# Keep a developer's .env / shell settings out of the test run
# ---------------------------------------------------------------------------
for _var in ("LEAGUE_DB_PATH", "HOST", "PORT", "LOG_LEVEL"):
    os.environ.pop(_var, None)


SAMPLE_DB = b"""[
    {"Name": "Cleo", "Wins": 10},
    {"Name": "Chris", "Wins": 33}]"""


class StubPlayerStore(PlayerStore):
    """Canned scores and league; remembers every record_win call."""

    def __init__(self, scores: dict | None = None, league: list | None = None):
        self.scores = dict(scores or {})
        self.win_calls: list = []
        self.league = list(league or [])

    def get_player_score(self, name: str) -> int:
        return self.scores.get(name, 0)

    def record_win(self, name: str) -> None:
        self.win_calls.append(name)

    def get_league(self) -> League:
        return League(self.league)


class BrokenPlayerStore(PlayerStore):
    """Every operation fails the way a dead disk would."""

    def get_player_score(self, name: str) -> int:
        raise OSError("disk unavailable")

    def record_win(self, name: str) -> None:
        raise OSError("disk unavailable")

    def get_league(self) -> League:
        raise OSError("disk unavailable")


def make_db_file(tmp_path, content: bytes = b"", name: str = "game.db.json"):
    path = tmp_path / name
    path.write_bytes(content)
    return path


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def stub_store():
    return StubPlayerStore(
        scores={"Pepper": 20, "Floyd": 10},
        league=[Player("Cleo", 32), Player("Chris", 20), Player("Tiest", 14)],
    )


@pytest.fixture
def database(tmp_path):
    """Open handle on a temp file seeded with Cleo (10) and Chris (33)."""
    from scorekeeper.infrastructure.repositories.file_player_store import open_database

    path = make_db_file(tmp_path, SAMPLE_DB)
    handle = open_database(str(path))
    yield handle
    handle.close()


@pytest.fixture
def client_for():
    """Build a TestClient around any store."""
    from fastapi.testclient import TestClient
    from scorekeeper.main import create_app

    def _make(store):
        return TestClient(create_app(store))

    return _make
