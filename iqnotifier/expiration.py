"""A single-shot expiration timer for one popup."""

from __future__ import annotations

import threading

from .notification import Signal


class ExpirationController:
    """Fires ``expired`` once the timeout (in milliseconds) passes while running.

    A timeout of zero removes the timer; ``expiration`` starts or stops it.
    """

    def __init__(self) -> None:
        self.expired = Signal()
        self.expiration_changed = Signal()
        self.timeout_changed = Signal()
        self._lock = threading.Lock()
        self._interval: int | None = None
        self._timer: threading.Timer | None = None
        self._generation = 0

    def __enter__(self) -> ExpirationController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def expiration(self) -> bool:
        with self._lock:
            return self._timer is not None

    @expiration.setter
    def expiration(self, value: bool) -> None:
        with self._lock:
            if self._interval is not None:
                if value:
                    self._start_locked()
                else:
                    self._stop_locked()
        self.expiration_changed.emit()

    @property
    def timeout(self) -> int:
        with self._lock:
            return self._interval or 0

    @timeout.setter
    def timeout(self, value: int) -> None:
        with self._lock:
            if value:
                running = self._timer is not None
                self._interval = int(value)
                if running:
                    self._start_locked()
            else:
                self._stop_locked()
                self._interval = None
        self.timeout_changed.emit()

    def close(self) -> None:
        """Stop a running timer without firing it."""
        with self._lock:
            self._stop_locked()

    def _start_locked(self) -> None:
        self._stop_locked()
        assert self._interval is not None
        generation = self._generation
        timer = threading.Timer(self._interval / 1000, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _stop_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        self.expired.emit()