"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

BACKENDS = ("json", "mongo")


@dataclass(frozen=True)
class Settings:
    backend: str = "json"
    data_dir: Path = DEFAULT_DATA_DIR
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "storefront"
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()
        backend = os.getenv("STOREFRONT_BACKEND", "json").strip().lower()
        if backend not in BACKENDS:
            raise ValueError(
                f"STOREFRONT_BACKEND must be one of {', '.join(BACKENDS)}, got '{backend}'"
            )
        return Settings(
            backend=backend,
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(DEFAULT_DATA_DIR))),
            mongodb_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
            mongodb_database=os.getenv("MONGODB_DATABASE", "storefront"),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
        )
