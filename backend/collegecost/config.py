"""Process configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

DEFAULT_DATASET_PATH = "college_costs.csv"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the lookup server."""

    dataset_path: Path = Path(DEFAULT_DATASET_PATH)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from *environ* (defaults to ``os.environ``).

    Raises ValueError if COLLEGE_COSTS_PORT is not an integer.
    """
    env = os.environ if environ is None else environ

    port_raw = env.get("COLLEGE_COSTS_PORT", str(DEFAULT_PORT))
    try:
        port = int(port_raw)
    except ValueError as exc:
        msg = f"COLLEGE_COSTS_PORT must be an integer, got {port_raw!r}"
        raise ValueError(msg) from exc

    return Settings(
        dataset_path=Path(env.get("COLLEGE_COSTS_CSV", DEFAULT_DATASET_PATH)),
        host=env.get("COLLEGE_COSTS_HOST", DEFAULT_HOST),
        port=port,
        log_level=env.get("COLLEGE_COSTS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
