"""
FactCheck Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    APP_VERSION: str = "1.0.0"

    # --- Scoring policy ---
    # JSON file with per-section overrides of the default policy table
    POLICY_PATH: str = os.getenv("FACTCHECK_POLICY_PATH", "")
    # Seed for the claim veracity source. Unset = unseeded (non-deterministic)
    CLAIM_SEED: Optional[int] = _optional_int("FACTCHECK_CLAIM_SEED")

    # --- Requests ---
    MAX_CONTENT_CHARS: int = int(os.getenv("FACTCHECK_MAX_CONTENT_CHARS", "50000"))

    # --- Server ---
    HOST: str = os.getenv("FACTCHECK_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("FACTCHECK_PORT", "5000"))

    # --- CORS ---
    # The browser extension calls from its own origin
    CORS_ORIGINS: str = os.getenv("FACTCHECK_CORS_ORIGINS", "*")


settings = Settings()
