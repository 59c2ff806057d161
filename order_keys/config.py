from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .digits import BASE_62_DIGITS
from .jitter import DEFAULT_JITTER_BITS


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    digits: str = BASE_62_DIGITS
    jitter_bits: int = DEFAULT_JITTER_BITS
    max_batch: int = 1000
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Read service settings from the environment."""
    settings = Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 8000),
        digits=os.getenv("ORDER_KEYS_DIGITS") or BASE_62_DIGITS,
        jitter_bits=_int_env("ORDER_KEYS_JITTER_BITS", DEFAULT_JITTER_BITS),
        max_batch=_int_env("ORDER_KEYS_MAX_BATCH", 1000),
        log_level=os.getenv("ORDER_KEYS_LOG_LEVEL", "INFO").upper(),
    )
    if settings.jitter_bits < 0:
        raise ValueError(f"ORDER_KEYS_JITTER_BITS must be non-negative, got {settings.jitter_bits}")
    if settings.max_batch < 1:
        raise ValueError(f"ORDER_KEYS_MAX_BATCH must be positive, got {settings.max_batch}")
    return settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
