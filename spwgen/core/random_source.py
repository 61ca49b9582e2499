"""OS-backed CSPRNG access.

Every random byte used by spwgen comes from ``os.urandom``. There is no
fallback generator: if the OS source fails the call fails.
"""
from __future__ import annotations

import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def get_bytes(self, n: int) -> bytes: ...


def secure_random_bytes(n: int) -> bytes:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError("byte count must be a positive integer")
    try:
        data = os.urandom(n)
    except OSError as exc:
        logger.error("OS CSPRNG failed for a %d byte request", n)
        raise OSError(f"OS CSPRNG failure requesting {n} byte(s): {exc}") from exc
    if len(data) != n:
        raise OSError(f"OS CSPRNG returned unexpected byte count ({len(data)} != {n})")
    return data


def assert_csprng_ready() -> None:
    secure_random_bytes(1)


class SystemRandomSource:
    def get_bytes(self, n: int) -> bytes:
        return secure_random_bytes(n)


DEFAULT_SOURCE = SystemRandomSource()
