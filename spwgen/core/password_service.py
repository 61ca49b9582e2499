from __future__ import annotations

import logging
from typing import Optional

from spwgen.core import password_engine as engine
from spwgen.core.charsets import build_pool, selected_classes
from spwgen.core.history import HistoryStore
from spwgen.core.models import PasswordRequest, PasswordResult
from spwgen.core.random_source import RandomSource
from spwgen.core.strength import DEFAULT_GUESSES_PER_SECOND, estimate_strength

logger = logging.getLogger(__name__)


def generate_passwords(
    request: PasswordRequest,
    *,
    source: Optional[RandomSource] = None,
    history: Optional[HistoryStore] = None,
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
) -> PasswordResult:
    if isinstance(request.count, bool) or not isinstance(request.count, int) or request.count <= 0:
        raise ValueError("count must be > 0")
    engine.validate_length(request.length)
    pool = build_pool(request.policy)

    # Same pool and length for every output, so one report covers the batch.
    strength = estimate_strength(len(pool), request.length, guesses_per_second=guesses_per_second)

    outputs = []
    for _ in range(request.count):
        outputs.append(engine.assemble_password(pool, request.length, source))

    if history is not None:
        for value in outputs:
            history.record(value)

    logger.info(
        "generated %d password(s): classes=%s pool_size=%d length=%d tier=%s",
        len(outputs),
        ",".join(selected_classes(request.policy)),
        len(pool),
        request.length,
        strength.tier,
    )
    return PasswordResult(
        outputs=tuple(outputs),
        pool_size=len(pool),
        length=request.length,
        strength=strength,
    )
