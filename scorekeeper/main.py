"""Entry point. Opens the league database, wires the store into routes and serves.

Persistence strategy:
  - A single JSON file (LEAGUE_DB_PATH, default game.db.json), rewritten on every win.
"""
import logging
import sys

from fastapi import FastAPI

from scorekeeper.api.routes.player_routes import router as player_router, init_routes
from scorekeeper.config import Settings
from scorekeeper.infrastructure.repositories.file_player_store import (
    CorruptStoreError,
    FileSystemPlayerStore,
    open_database,
)

log = logging.getLogger("scorekeeper.startup")


def create_app(store) -> FastAPI:
    """FastAPI app serving `store` (any PlayerStore)."""
    app = FastAPI(
        title="Scorekeeper",
        description="Player wins and league table.",
        version="1.0.0",
    )

    init_routes(store)
    app.include_router(player_router)

    @app.get("/health")
    def health():
        result = {"status": "online"}
        try:
            result["players"] = len(store.get_league())
        except Exception as exc:
            result["players"] = f"ERROR: {type(exc).__name__}"
        return result

    return app


def build_store(settings: Settings) -> FileSystemPlayerStore:
    """Open the configured database file; exits the process if it is unusable."""
    try:
        database = open_database(settings.db_path)
    except OSError as exc:
        log.error("Problem opening %s: %s", settings.db_path, exc)
        raise SystemExit(1)

    try:
        return FileSystemPlayerStore(database)
    except CorruptStoreError as exc:
        database.close()
        log.error("Problem creating file system player store: %s", exc)
        raise SystemExit(1)


def run() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    store = build_store(settings)
    log.info("Serving league from %s on %s:%d", settings.db_path, settings.host, settings.port)

    import uvicorn
    uvicorn.run(create_app(store), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
