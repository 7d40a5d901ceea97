"""The collection of Pokemon the user has caught."""

from __future__ import annotations

import threading

from .models import Pokemon


class Pokedex:
    """Caught Pokemon, keyed by name."""

    def __init__(self) -> None:
        self.entries: dict[str, Pokemon] = {}
        self._lock = threading.Lock()

    def add(self, pokemon: Pokemon) -> None:
        """Record *pokemon*, replacing any earlier entry with the same name."""
        with self._lock:
            self.entries[pokemon.name] = pokemon

    def list(self) -> list[Pokemon]:
        """Return every caught Pokemon."""
        with self._lock:
            return list(self.entries.values())

    def get(self, name: str) -> Pokemon | None:
        """Return the caught Pokemon called *name*, or None."""
        with self._lock:
            return self.entries.get(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self.entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self.entries