# File: stitcher/core/config/settings.py

import os
from typing import Optional


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("STITCHER_LOG_LEVEL", "INFO").upper()

    # --- Concurrency ---
    # Raw value; the CLI validates it. Unset lets the executor pick the host's default parallelism
    MAX_WORKERS: Optional[str] = os.getenv("STITCHER_MAX_WORKERS")

    # --- Job Ledger ---
    # In-memory by default: the ledger lives for exactly one run.
    DATABASE_URL: str = os.getenv("STITCHER_DATABASE_URL", "sqlite://")

    # --- Filters ---
    DEFAULT_FILE_FILTER: str = "*"
    DEFAULT_DIR_FILTER: str = "*"
    DEFAULT_SEPARATOR: str = "-"


settings = Settings()
