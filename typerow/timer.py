from __future__ import annotations

import logging
import threading
import time
from typing import Optional

log = logging.getLogger(__name__)


class Timer:
    """
    Whole-second session clock. Once started, a daemon worker bumps the
    elapsed count every `interval` seconds; there is no way to stop it,
    the owner just stops looking.
    """

    def __init__(self, limit: int = 60, interval: float = 1.0) -> None:
        self._limit = limit
        self._interval = interval
        self._elapsed = 0
        self._running = False
        self._lock = threading.Lock()
        self._worker: Optional[threading.Thread] = None

    def set(self, limit: int) -> None:
        if self._running:
            raise RuntimeError("cannot change the limit of a running timer")
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def running(self) -> bool:
        return self._running

    def elapsed(self) -> int:
        with self._lock:
            return self._elapsed

    def is_limit(self) -> bool:
        with self._lock:
            return self._elapsed >= self._limit

    def start(self) -> None:
        self._running = True
        self._worker = threading.Thread(target=self._run, name="typerow-timer", daemon=True)
        self._worker.start()
        log.info("timer started, limit %ss", self._limit)

    def _run(self) -> None:
        while True:
            time.sleep(self._interval)
            with self._lock:
                self._elapsed += 1
