"""League entity -- players ranked by wins, JSON wire format."""
import json
from typing import Iterable, Iterator, List


class LeagueDecodeError(ValueError):
    """Payload cannot be turned into a League."""


class Player:
    """One league row. Name is the identity, wins only ever grows."""

    def __init__(self, name: str, wins: int = 0):
        self.name = name
        self.wins = wins

    def to_dict(self) -> dict:
        return {"Name": self.name, "Wins": self.wins}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.name == other.name and self.wins == other.wins

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {self.wins})"


class League:
    """
    Ordered collection of players.
    Callers always receive it sorted by wins, highest first. Sorting is stable,
    so players with equal wins keep their current relative order.
    """

    def __init__(self, players: Iterable[Player] | None = None):
        self._players: List[Player] = list(players or [])

    def find(self, name: str) -> Player | None:
        """Exact, case-sensitive lookup. None means the player is unknown."""
        for player in self._players:
            if player.name == name:
                return player
        return None

    def add(self, player: Player) -> None:
        if self.find(player.name) is not None:
            raise ValueError(f"Player {player.name!r} already in league")
        self._players.append(player)

    def copy(self) -> "League":
        return League(Player(p.name, p.wins) for p in self._players)

    def sort(self) -> "League":
        self._players.sort(key=lambda p: p.wins, reverse=True)
        return self

    def to_list(self) -> List[dict]:
        return [p.to_dict() for p in self._players]

    def encode(self) -> bytes:
        return json.dumps(self.to_list(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def decode(cls, raw: bytes | str) -> "League":
        """
        Parse the persisted JSON form: an array of {"Name": str, "Wins": int}.
        Field names match case-insensitively. Empty input and `null` give an
        empty league.
        """
        if not raw or not raw.strip():
            return cls()
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise LeagueDecodeError(f"invalid JSON: {exc}") from exc
        return cls.from_list(data)

    @classmethod
    def from_list(cls, data) -> "League":
        if data is None:
            return cls()
        if not isinstance(data, list):
            raise LeagueDecodeError(f"expected a JSON array, got {type(data).__name__}")

        league = cls()
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise LeagueDecodeError(f"entry {index} is not an object")
            fields = {str(k).lower(): v for k, v in item.items()}
            name = fields.get("name")
            wins = fields.get("wins", 0)
            if not isinstance(name, str):
                raise LeagueDecodeError(f"entry {index} has no string name")
            # bool is an int subclass; true/false are not win counts
            if isinstance(wins, bool) or not isinstance(wins, int) or wins < 0:
                raise LeagueDecodeError(f"entry {index} ({name!r}) has invalid wins: {wins!r}")
            if league.find(name) is not None:
                raise LeagueDecodeError(f"duplicate player {name!r}")
            league._players.append(Player(name, wins))
        return league

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __eq__(self, other) -> bool:
        if isinstance(other, League):
            return self._players == other._players
        if isinstance(other, list):
            return self._players == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"League({self._players!r})"
