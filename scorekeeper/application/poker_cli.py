"""Command-line scorekeeper: reads "<name> wins" and records the win."""
import logging
import sys
from typing import TextIO

from scorekeeper.config import Settings
from scorekeeper.infrastructure.repositories.player_store import PlayerStore

log = logging.getLogger("scorekeeper.cli")

WIN_SUFFIX = " wins"
GREETING = "Let's play poker"
USAGE = "Type {Name} wins to record a win"


def extract_winner(line: str) -> str | None:
    """'Chris wins' -> 'Chris'. None when the line is not a win."""
    text = line.rstrip("\r\n")
    if not text.endswith(WIN_SUFFIX):
        return None
    winner = text[: -len(WIN_SUFFIX)]
    return winner or None


class CLI:
    def __init__(self, store: PlayerStore, stdin: TextIO):
        self._store = store
        self._in = stdin

    def play_poker(self) -> str | None:
        """Read one line and record the winner it names."""
        winner = extract_winner(self._in.readline())
        if winner is None:
            log.info("Input did not name a winner; nothing recorded")
            return None
        self._store.record_win(winner)
        return winner


def main() -> None:
    from scorekeeper.main import build_store

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)
    store = build_store(settings)

    print(GREETING)
    print(USAGE)
    CLI(store, sys.stdin).play_poker()


if __name__ == "__main__":
    main()
