from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable


class RateLimiter:
    """Per-client sliding-window admission gate."""

    def __init__(
        self,
        max_requests: int = 30,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_requests = max_requests
        self._window = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def _evict(self, now: float) -> None:
        # Drop clients whose every hit has left the window, at most once per window
        if now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        stale = [cid for cid, hits in self._hits.items() if not hits or now - hits[-1] >= self._window]
        for cid in stale:
            del self._hits[cid]

    def admit(self, client_id: str) -> bool:
        """Record a request for ``client_id``; False when its window is full.

        Rejected requests are not recorded.
        """
        now = self._clock()
        with self._lock:
            self._evict(now)
            hits = self._hits.setdefault(client_id, deque())
            while hits and now - hits[0] >= self._window:
                hits.popleft()
            if len(hits) >= self._max_requests:
                return False
            hits.append(now)
            return True
