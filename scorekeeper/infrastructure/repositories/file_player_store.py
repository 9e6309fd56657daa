"""League persistence (single JSON file, rewritten on every win).

The store owns one open, seekable, binary read/write stream. The file is the
source of truth; the cached League is refreshed on every read and flushed
wholesale on every write. All operations hold one lock, so concurrent request
threads see linearizable behaviour. A crash in the middle of a rewrite can leave
a truncated file behind; nothing here tries to recover from that.
"""
import logging
import os
import threading
from typing import BinaryIO

from scorekeeper.domain.league import League, LeagueDecodeError, Player
from scorekeeper.infrastructure.repositories.player_store import CorruptStoreError, PlayerStore

__all__ = ["CorruptStoreError", "FileSystemPlayerStore", "open_database"]

log = logging.getLogger("scorekeeper.store")

EMPTY_LEAGUE = b"[]"


def open_database(path: str) -> BinaryIO:
    """Open `path` read/write, creating it if missing and never truncating it."""
    os.close(os.open(path, os.O_RDWR | os.O_CREAT, 0o666))
    return open(path, "r+b")


def _stream_name(stream) -> str:
    name = getattr(stream, "name", None)
    return str(name) if name is not None else repr(stream)


class FileSystemPlayerStore(PlayerStore):
    """JSON-file-backed player store."""

    def __init__(self, database: BinaryIO):
        self._database = database
        self._name = _stream_name(database)
        self._lock = threading.Lock()
        with self._lock:
            self._bootstrap()
            self._league = self._read_league()

    @property
    def name(self) -> str:
        return self._name

    def get_player_score(self, name: str) -> int:
        with self._lock:
            player = self._league.find(name)
            return player.wins if player else 0

    def record_win(self, name: str) -> None:
        with self._lock:
            league = self._league.copy()
            player = league.find(name)
            if player:
                player.wins += 1
            else:
                league.add(Player(name, 1))
            league.sort()
            # cache only what reached the file
            self._write_league(league)
            self._league = league

    def get_league(self) -> League:
        """Re-read the file so changes made outside this process are visible."""
        with self._lock:
            self._league = self._read_league()
            return self._league.copy()

    # --- Stream access (caller holds the lock) ---

    def _bootstrap(self) -> None:
        self._database.seek(0, os.SEEK_END)
        if self._database.tell() == 0:
            log.info("Initialising empty league in %s", self._name)
            self._database.write(EMPTY_LEAGUE)
            self._database.flush()
        self._database.seek(0)

    def _read_league(self) -> League:
        self._database.seek(0)
        raw = self._database.read()
        try:
            return League.decode(raw).sort()
        except LeagueDecodeError as exc:
            log.error("Cannot decode league from %s: %s", self._name, exc)
            raise CorruptStoreError(self._name, exc) from exc

    def _write_league(self, league: League) -> None:
        payload = league.encode()
        self._database.seek(0)
        self._database.truncate()
        self._database.write(payload)
        self._database.flush()
        log.debug("Persisted %d players to %s", len(league), self._name)
