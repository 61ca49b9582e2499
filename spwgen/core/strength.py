from __future__ import annotations

import math

from spwgen.core.models import (
    TIER_MEDIUM,
    TIER_STRONG,
    TIER_VERY_STRONG,
    TIER_VERY_WEAK,
    TIER_WEAK,
    StrengthReport,
)


DEFAULT_GUESSES_PER_SECOND = 1e10
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000
CRACK_TIME_HORIZON_SECONDS = SECONDS_PER_YEAR * 100
INSTANT_LABEL = "Instantly"
BEYOND_HORIZON_LABEL = "Millions of years"


def tier_from_entropy_bits(entropy_bits: float) -> str:
    if entropy_bits < 45:
        return TIER_VERY_WEAK
    if entropy_bits < 60:
        return TIER_WEAK
    if entropy_bits < 80:
        return TIER_MEDIUM
    if entropy_bits < 100:
        return TIER_STRONG
    return TIER_VERY_STRONG


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _unit(value: int, name: str) -> str:
    return f"{value} {name}" if value == 1 else f"{value} {name}s"


def format_crack_time(seconds: float) -> str:
    if seconds < 1:
        return INSTANT_LABEL
    if seconds < SECONDS_PER_MINUTE:
        return _unit(_round_half_up(seconds), "second")
    if seconds < SECONDS_PER_HOUR:
        return _unit(_round_half_up(seconds / SECONDS_PER_MINUTE), "minute")
    if seconds < SECONDS_PER_DAY:
        return _unit(_round_half_up(seconds / SECONDS_PER_HOUR), "hour")
    if seconds < SECONDS_PER_YEAR:
        return _unit(_round_half_up(seconds / SECONDS_PER_DAY), "day")
    if seconds < CRACK_TIME_HORIZON_SECONDS:
        return _unit(_round_half_up(seconds / SECONDS_PER_YEAR), "year")
    return BEYOND_HORIZON_LABEL


def crack_time_from_entropy_bits(entropy_bits: float, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> str:
    """Average-case exhaustive search time: half the keyspace at ``guesses_per_second``."""
    if guesses_per_second <= 0:
        raise ValueError("guesses_per_second must be > 0")
    # Stay in log2 space until the value is known to fit in a float.
    log2_seconds = entropy_bits - math.log2(guesses_per_second) - 1.0
    if log2_seconds >= math.log2(CRACK_TIME_HORIZON_SECONDS):
        return BEYOND_HORIZON_LABEL
    return format_crack_time(2.0**log2_seconds)


def estimate_theoretical_password_bits(pool_size: int, length: int) -> float:
    if pool_size < 2 or length <= 0:
        return 0.0
    return float(length) * math.log2(pool_size)


def estimate_strength(
    pool_size: int,
    length: int,
    *,
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
) -> StrengthReport:
    """Score a (pool size, length) pair; password content never enters the estimate."""
    if isinstance(pool_size, bool) or not isinstance(pool_size, int) or pool_size < 1:
        raise ValueError("pool_size must be an integer >= 1")
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ValueError("length must be an integer >= 0")
    entropy_bits = estimate_theoretical_password_bits(pool_size, length)
    return StrengthReport(
        entropy_bits=entropy_bits,
        tier=tier_from_entropy_bits(entropy_bits),
        crack_time=crack_time_from_entropy_bits(entropy_bits, guesses_per_second),
    )
