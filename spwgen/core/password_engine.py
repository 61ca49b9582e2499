#!/usr/bin/env python3
r"""
password_engine.py - unbiased password assembly from a character policy (os.urandom)

Each character is an independent uniform draw from the policy's pool:
  - bytes come from the OS CSPRNG only
  - rejection sampling removes modulo bias
  - no post-hoc shuffle; positions are already independent
"""
from __future__ import annotations

import logging

from spwgen.core.charsets import build_pool
from spwgen.core.error_dialect import InvalidLengthError, RandomSourceUnavailableError
from spwgen.core.models import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, Policy
from spwgen.core.random_source import DEFAULT_SOURCE, RandomSource
from spwgen.core.sampler import UnbiasedSampler

logger = logging.getLogger(__name__)

# Up-front draws per requested character; covers the common case without top-ups.
INITIAL_BATCH_FACTOR = 2


def validate_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError("length must be an integer")
    if length < MIN_PASSWORD_LENGTH or length > MAX_PASSWORD_LENGTH:
        raise InvalidLengthError(
            f"length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}, got {length}"
        )
    return length


def _read(source: RandomSource, n: int) -> bytes:
    try:
        data = source.get_bytes(n)
    except OSError as exc:
        raise RandomSourceUnavailableError(str(exc) or "secure random source unavailable") from exc
    if len(data) != n:
        raise RandomSourceUnavailableError(f"random source returned unexpected byte count ({len(data)} != {n})")
    return data


def assemble_password(pool: str, length: int, source: RandomSource | None = None) -> str:
    if not pool:
        raise ValueError("pool is empty")
    if length < 0:
        raise ValueError("length must be >= 0")
    rng = DEFAULT_SOURCE if source is None else source
    sampler = UnbiasedSampler(len(pool))

    chars: list[str] = []
    batch = _read(rng, max(1, length * INITIAL_BATCH_FACTOR) * sampler.width)
    for index in sampler.indices(batch):
        if len(chars) == length:
            break
        chars.append(pool[index])

    top_ups = 0
    while len(chars) < length:
        top_ups += 1
        for index in sampler.indices(_read(rng, sampler.width)):
            chars.append(pool[index])

    logger.debug(
        "assembled password: pool_size=%d length=%d rejected=%d top_ups=%d",
        len(pool),
        length,
        sampler.rejected,
        top_ups,
    )
    return "".join(chars)


def generate(policy: Policy, length: int, *, source: RandomSource | None = None) -> str:
    """Generate one password of ``length`` characters under ``policy``.

    Raises ``InvalidLengthError``, ``InvalidPolicyError`` (or its ``EmptyPoolError``
    subclass) and ``RandomSourceUnavailableError``; nothing is returned on failure.
    """
    validate_length(length)
    pool = build_pool(policy)
    return assemble_password(pool, length, source)
