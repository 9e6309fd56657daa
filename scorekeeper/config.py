"""Runtime settings read from the environment (and an optional .env file)."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_DB_PATH = "game.db.json"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Settings:
    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Settings":
        load_dotenv(env_file or os.path.join(PROJECT_DIR, ".env"))
        raw_port = os.environ.get("PORT", "").strip()
        try:
            port = int(raw_port) if raw_port else DEFAULT_PORT
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}")
        return cls(
            db_path=os.environ.get("LEAGUE_DB_PATH", "").strip() or DEFAULT_DB_PATH,
            host=os.environ.get("HOST", "").strip() or DEFAULT_HOST,
            port=port,
            log_level=os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO",
        )
