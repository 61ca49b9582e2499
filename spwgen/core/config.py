from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from spwgen.core.models import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from spwgen.core.strength import DEFAULT_GUESSES_PER_SECOND


DEFAULT_COUNT = 1
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GeneratorConfig:
    default_length: int = DEFAULT_PASSWORD_LENGTH
    default_count: int = DEFAULT_COUNT
    history_size: int = DEFAULT_HISTORY_SIZE
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_int(value: str, field: str) -> int:
    raw = value.strip()
    if not raw:
        raise ValueError(f"{field} must be a non-empty integer")
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{field} must be an integer") from exc


def _parse_float(value: str, field: str) -> float:
    raw = value.strip()
    if not raw:
        raise ValueError(f"{field} must be a non-empty number")
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{field} must be a number") from exc


def parse_log_level(value: str, field: str = "log level") -> str:
    level = value.strip().upper()
    if level not in LOG_LEVEL_CHOICES:
        raise ValueError(f"{field} must be one of {', '.join(LOG_LEVEL_CHOICES)}")
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> GeneratorConfig:
    env = os.environ if environ is None else environ

    default_length = _parse_int(
        env.get("SPWGEN_DEFAULT_LENGTH", str(DEFAULT_PASSWORD_LENGTH)), "SPWGEN_DEFAULT_LENGTH"
    )
    default_count = _parse_int(env.get("SPWGEN_DEFAULT_COUNT", str(DEFAULT_COUNT)), "SPWGEN_DEFAULT_COUNT")
    history_size = _parse_int(env.get("SPWGEN_HISTORY_SIZE", str(DEFAULT_HISTORY_SIZE)), "SPWGEN_HISTORY_SIZE")
    guesses_per_second = _parse_float(
        env.get("SPWGEN_GUESSES_PER_SECOND", str(DEFAULT_GUESSES_PER_SECOND)), "SPWGEN_GUESSES_PER_SECOND"
    )
    log_level = parse_log_level(env.get("SPWGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL), "SPWGEN_LOG_LEVEL")

    if not (MIN_PASSWORD_LENGTH <= default_length <= MAX_PASSWORD_LENGTH):
        raise ValueError(
            f"SPWGEN_DEFAULT_LENGTH must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
        )
    if default_count <= 0:
        raise ValueError("SPWGEN_DEFAULT_COUNT must be > 0")
    if history_size <= 0:
        raise ValueError("SPWGEN_HISTORY_SIZE must be > 0")
    if not guesses_per_second > 0:
        raise ValueError("SPWGEN_GUESSES_PER_SECOND must be > 0")

    return GeneratorConfig(
        default_length=default_length,
        default_count=default_count,
        history_size=history_size,
        guesses_per_second=guesses_per_second,
        log_level=log_level,
    )
