"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/gate.py
Bounded counting semaphore shared by every directory and fingerprint task.
Keeps the number of simultaneous directory reads / open files at or below the worker count.
"""
import threading


class ConcurrencyGate:
    """
    At most `limit` holders at any time. No fairness guarantee.

    Also tracks how many tasks are currently inside the gate and the highest
    value ever observed, so callers can verify the bound.

    Usage:
        gate = ConcurrencyGate(8)
        with gate:
            ...  # bounded work
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError(f"Gate limit must be at least 1, got {limit}")
        self.limit = limit
        self._slots = threading.BoundedSemaphore(limit)
        self._lock = threading.Lock()
        self._in_flight = 0
        self._peak = 0

    def acquire(self) -> None:
        """Block until a slot is free, then take it."""
        self._slots.acquire()
        with self._lock:
            self._in_flight += 1
            if self._in_flight > self._peak:
                self._peak = self._in_flight

    def release(self) -> None:
        """Free one slot. Raises ValueError if nothing is held."""
        with self._lock:
            if self._in_flight == 0:
                raise ValueError("ConcurrencyGate released more times than acquired")
            self._in_flight -= 1
        self._slots.release()

    @property
    def in_flight(self) -> int:
        with self._lock:
            return self._in_flight

    @property
    def peak(self) -> int:
        with self._lock:
            return self._peak

    def __enter__(self) -> "ConcurrencyGate":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __repr__(self):
        return f"<ConcurrencyGate limit={self.limit}, in_flight={self.in_flight}, peak={self.peak}>"
