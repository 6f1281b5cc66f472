import os
from pathlib import Path

from dotenv import load_dotenv

LOG_LEVEL_VAR = "URLPREVIEW_LOG_LEVEL"
LOG_DIR_VAR = "URLPREVIEW_LOG_DIR"


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def log_level() -> str:
    return os.getenv(LOG_LEVEL_VAR, "INFO")


def log_dir() -> Path | None:
    """Directory for log files; file logging is off when unset."""
    value = os.getenv(LOG_DIR_VAR)
    return Path(value) if value else None
