"""A thread-safe, time-limited in-memory cache for raw response bodies."""

from __future__ import annotations

import threading
import time


def to_kilobytes(size: int) -> int:
    """Return *size* bytes as whole kilobytes."""
    return size // 1024


class Cache:
    """Stores byte values by key; a background thread drops entries older than *lifetime* seconds."""

    def __init__(self, lifetime: float) -> None:
        if lifetime <= 0:
            raise ValueError("cache lifetime must be positive")
        self.lifetime = float(lifetime)
        self.total_bytes = 0
        self._entries: dict[str, tuple[float, bytes]] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, daemon=True)
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Store *value* under *key*, replacing any earlier value."""
        value = bytes(value)
        with self._lock:
            self._entries[key] = (time.monotonic(), value)
            self.total_bytes += len(value)

    def get(self, key: str) -> bytes | None:
        """Return the value stored under *key*, or None when it is absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry[1]

    def reap(self, now: float) -> None:
        """Drop every entry whose age at monotonic time *now* is at least the lifetime."""
        with self._lock:
            self._entries = {
                key: entry
                for key, entry in self._entries.items()
                if now - entry[0] < self.lifetime
            }

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.lifetime):
            self.reap(time.monotonic())