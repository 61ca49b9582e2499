from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Optional, Tuple

from spwgen.core.models import DEFAULT_HISTORY_SIZE

logger = logging.getLogger(__name__)


class HistoryStore:
    """Most-recent-first record of generated passwords, held in memory only."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError("history capacity must be an integer >= 1")
        self._capacity = capacity
        self._entries: deque[str] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, password: str) -> None:
        with self._lock:
            evicting = len(self._entries) == self._capacity
            self._entries.appendleft(password)
        if evicting:
            logger.debug("history full (capacity=%d); evicted oldest entry", self._capacity)

    def list(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    def latest(self) -> Optional[str]:
        with self._lock:
            return self._entries[0] if self._entries else None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
