"""Configuration for workspace_insights (env-overridable)."""

from __future__ import annotations

import os
from pathlib import Path


def _env_path(key: str, default: Path) -> Path:
    return Path(os.getenv(key, str(default))).expanduser()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


PROJECT_ROOT = Path(__file__).resolve().parents[2]

DATA_DIR = _env_path("WI_DATA_DIR", PROJECT_ROOT / "data")
DB_PATH = DATA_DIR / "workspace.db"

# Fixed metric and ranking defaults; override per call, not from the environment.
READING_WORDS_PER_MINUTE = 200
KEY_PHRASE_LIMIT = 10
SEARCH_RESULT_LIMIT = 20
SNIPPET_MAX_CHARS = 100

# Worker threads behind SearchSession.submit and AnalysisSession.submit.
SESSION_WORKERS = _env_int("WI_SESSION_WORKERS", 1)

MAX_DOC_BYTES = _env_int("WI_MAX_DOC_BYTES", 30_000_000)
MAX_PDF_PAGES = _env_int("WI_MAX_PDF_PAGES", 200)


def ensure_data_dirs() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
