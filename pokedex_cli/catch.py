"""Catch chance calculation and the suspense shown while catching."""

from __future__ import annotations

import random
import sys
import time
from typing import Any, TextIO


def calculate_catch_chance(base_experience: int) -> float:
    """Return the chance, in percent, of catching a Pokemon with this base experience."""
    if base_experience < 0:
        return 100.0
    return 100.0 - min(float(base_experience), 400.0) / 10.0


def try_catch(base_experience: int, rng: Any = None) -> bool:
    """Roll for a catch; True when the Pokemon is caught."""
    attempt = (rng or random).random() * 100
    return attempt <= calculate_catch_chance(base_experience)


def create_tension(out: TextIO | None = None, steps: int = 4, delay: float = 0.5) -> None:
    """Print a dot every *delay* seconds, *steps* times, then end the line."""
    stream = out or sys.stdout
    for _ in range(steps):
        print(".", end="", file=stream, flush=True)
        time.sleep(delay)
    print(file=stream, flush=True)