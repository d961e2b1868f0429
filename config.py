# config.py
from dataclasses import dataclass
from pathlib import Path

# --- Defaults ---
DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"

# Every standard method except OPTIONS, which the header middleware answers
# before routing. Non-standard verbs get Starlette's 405.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "TRACE", "CONNECT"]


@dataclass(frozen=True)
class Settings:
    tasks_file: Path = Path(DEFAULT_TASKS_FILE)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
