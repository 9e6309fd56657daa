"""Player API routes -- score lookup, win recording, league table."""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from scorekeeper.infrastructure.repositories.player_store import CorruptStoreError


router = APIRouter(tags=["players"])

log = logging.getLogger("scorekeeper.api")


class LeagueEntry(BaseModel):
    Name: str
    Wins: int = Field(..., ge=0)


_store = None


def init_routes(store):
    global _store
    _store = store


def _store_failure(operation: str, exc: Exception) -> HTTPException:
    log.error("Player store %s failed: %s", operation, exc, exc_info=exc)
    return HTTPException(status_code=500, detail="Player store unavailable")


# ---------------------------------------------------------------------------
# Players
# ---------------------------------------------------------------------------

@router.get("/players/{name:path}", response_class=PlainTextResponse)
def api_get_player_score(name: str):
    """Wins as a plain decimal body. Unknown players get 404 with body "0"."""
    try:
        score = _store.get_player_score(name)
    except (CorruptStoreError, OSError) as exc:
        raise _store_failure("get_player_score", exc)
    status = 200 if score else 404
    return PlainTextResponse(str(score), status_code=status)


@router.post("/players/{name:path}", status_code=202)
def api_record_win(name: str):
    """Record one win. Accepted with an empty body."""
    try:
        _store.record_win(name)
    except (CorruptStoreError, OSError) as exc:
        raise _store_failure("record_win", exc)
    return Response(status_code=202)


# ---------------------------------------------------------------------------
# League
# ---------------------------------------------------------------------------

@router.get("/league", response_model=List[LeagueEntry])
def api_get_league():
    """Full league table, highest wins first."""
    try:
        league = _store.get_league()
    except (CorruptStoreError, OSError) as exc:
        raise _store_failure("get_league", exc)
    return league.to_list()
