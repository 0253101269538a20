"""
resthandler: Identifier Generation
==================================

What:  Services that hand out integer identifiers for newly created entities.
How:   Handlers receive an IdGenerator in their constructor instead of
       calling a global random source, so tests can pin the ids.
"""

import itertools
import random
import threading
from abc import ABC, abstractmethod
from typing import Optional

# Largest value of a signed 63-bit integer, the range of ids handed out by
# RandomIdGenerator (always non-negative).
MAX_ID = (1 << 63) - 1


class IdGenerator(ABC):
    """Source of identifiers for new entities."""

    @abstractmethod
    def next_id(self) -> int:
        """Return a fresh, non-negative identifier."""
        ...


class RandomIdGenerator(IdGenerator):
    """
    Uniformly random non-negative 63-bit identifiers.

    Args:
        rng: Random instance to draw from. Pass a seeded random.Random for
             reproducible sequences; defaults to a privately seeded one.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def next_id(self) -> int:
        return self._rng.randint(0, MAX_ID)


class SequentialIdGenerator(IdGenerator):
    """Monotonic counter starting at `start`. Safe to share across threads."""

    def __init__(self, start: int = 1):
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)
