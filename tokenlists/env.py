import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    strict: bool = False


def get_settings() -> Settings:
    """Build settings from TOKENLISTS_* environment variables."""
    log_dir = os.environ.get("TOKENLISTS_LOG_DIR", "").strip()
    return Settings(
        log_level=os.environ.get("TOKENLISTS_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_dir=Path(log_dir) if log_dir else None,
        strict=os.environ.get("TOKENLISTS_STRICT", "").strip().lower() in TRUTHY,
    )
