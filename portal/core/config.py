"""
Environment-driven settings for the customer portal.

All simulated latencies and the payment failure rate live here so tests can
run with zero delays and a deterministic gateway.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


def _env_float(name: str, default: float) -> float:
    """
    Read a float from the environment.

    Raises:
        ValueError: If the variable is set but not a valid number.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime configuration for the portal API."""

    claim_processing_delay: float = 1.5
    payment_processing_delay: float = 2.0
    auth_delay: float = 1.0
    contact_delay: float = 1.0
    payment_failure_rate: float = 0.1
    demo_password: str = "password123"
    storage_path: str = ".portal_storage.json"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self) -> None:
        for label in (
            "claim_processing_delay",
            "payment_processing_delay",
            "auth_delay",
            "contact_delay",
        ):
            if getattr(self, label) < 0:
                raise ValueError(f"{label} cannot be negative")
        if not 0.0 <= self.payment_failure_rate <= 1.0:
            raise ValueError("payment_failure_rate must be between 0 and 1")


def load_settings() -> Settings:
    """Build a fresh Settings object from environment variables."""
    return Settings(
        claim_processing_delay=_env_float("CLAIM_PROCESSING_DELAY", 1.5),
        payment_processing_delay=_env_float("PAYMENT_PROCESSING_DELAY", 2.0),
        auth_delay=_env_float("AUTH_DELAY", 1.0),
        contact_delay=_env_float("CONTACT_DELAY", 1.0),
        payment_failure_rate=_env_float("PAYMENT_FAILURE_RATE", 0.1),
        demo_password=os.getenv("DEMO_PASSWORD", "password123"),
        storage_path=os.getenv("PORTAL_STORAGE_PATH", ".portal_storage.json"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("CORS_ORIGINS", "*"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return load_settings()


__all__ = ["Settings", "load_settings", "get_settings"]
