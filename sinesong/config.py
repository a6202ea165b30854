import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SONGS_DIR = "songs"


@dataclass
class Settings:
    songs_dir: Path
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment (populate it with ``load_dotenv`` first)."""
    return Settings(
        songs_dir=Path(os.getenv("SINESONG_SONGS_DIR", DEFAULT_SONGS_DIR)),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
