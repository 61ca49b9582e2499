"""Rejection sampling from random bytes to uniform pool indices.

Mapping a byte straight through ``b % n`` over-represents low indices whenever
256 is not a multiple of ``n``. Draws at or above the largest multiple of ``n``
are discarded instead, so every accepted index is exactly uniform.
"""
from __future__ import annotations

from typing import Iterator

from spwgen.core.random_source import RandomSource


def draw_width(pool_size: int) -> int:
    """Bytes consumed per draw: one byte up to 256 symbols, wider above that."""
    _check_pool_size(pool_size)
    width = 1
    while 256**width < pool_size:
        width += 1
    return width


def rejection_threshold(pool_size: int) -> int:
    span = 256 ** draw_width(pool_size)
    return span - (span % pool_size)


def _check_pool_size(pool_size: int) -> None:
    if isinstance(pool_size, bool) or not isinstance(pool_size, int) or pool_size < 1:
        raise ValueError("pool size must be a positive integer")


class UnbiasedSampler:
    def __init__(self, pool_size: int) -> None:
        _check_pool_size(pool_size)
        self.pool_size = pool_size
        self.width = draw_width(pool_size)
        self.threshold = rejection_threshold(pool_size)
        self.rejected = 0

    @property
    def rejection_probability(self) -> float:
        return 1.0 - self.threshold / float(256**self.width)

    def indices(self, data: bytes) -> Iterator[int]:
        """Yield one index per accepted draw in ``data``; a trailing partial draw is ignored."""
        width = self.width
        usable = len(data) - (len(data) % width)
        for offset in range(0, usable, width):
            if width == 1:
                value = data[offset]
            else:
                value = int.from_bytes(data[offset : offset + width], "big")
            if value >= self.threshold:
                self.rejected += 1
                continue
            yield value % self.pool_size

    def sample(self, count: int, source: RandomSource) -> list[int]:
        if count < 0:
            raise ValueError("count must be >= 0")
        out: list[int] = []
        while len(out) < count:
            needed = count - len(out)
            data = source.get_bytes(needed * self.width)
            if len(data) != needed * self.width:
                raise OSError(f"random source returned unexpected byte count ({len(data)} != {needed * self.width})")
            for index in self.indices(data):
                out.append(index)
        return out
