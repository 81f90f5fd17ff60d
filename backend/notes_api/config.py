import os
from dataclasses import dataclass
from pathlib import Path

# Base data dir: repository_root/data (we are in backend/notes_api/)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _log_level_env(name: str, default: str = "INFO") -> str:
    level = os.getenv(name, default).upper()
    if level not in _LOG_LEVELS:
        return default
    return level


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    notes_file: str = "notes.json"
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001

    @property
    def notes_path(self) -> Path:
        return self.data_dir / self.notes_file


def load_settings() -> Settings:
    return Settings(
        data_dir=Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR))),
        notes_file=os.getenv("NOTES_FILE", "notes.json"),
        environment=os.getenv("APP_ENV", "development"),
        log_level=_log_level_env("LOG_LEVEL"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 3001),
    )
