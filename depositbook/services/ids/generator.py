"""
Depositor ID Generation

IDs look like PZ123456: a letter prefix and a six-digit number drawn
uniformly from [100000, 999999].

DESIGN DECISION: Generation sits behind an interface so tests can
supply a fixed sequence instead of randomness. The generator does not
check uniqueness; the bank redraws on collision.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from depositbook.config import IdentifierSettings, get_settings
from depositbook.errors import IdentifierExhaustedError


class IdGenerator(ABC):
    """Abstract source of depositor IDs."""
    
    @abstractmethod
    def generate(self) -> str:
        """Return a new ID. Uniqueness is not guaranteed."""
        pass


class RandomIdGenerator(IdGenerator):
    """
    Draws IDs from a private random.Random instance.
    
    Unseeded instances take their seed from OS entropy, so two
    processes never share a sequence.
    """
    
    def __init__(
        self,
        settings: Optional[IdentifierSettings] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize generator.
        
        Args:
            settings: ID prefix and numeric range. Defaults to the application settings.
            seed: Seed for reproducible IDs. Overrides settings.random_seed.
        """
        self._settings = settings if settings is not None else get_settings().ids
        if seed is None:
            seed = self._settings.random_seed
        self._random = random.Random(seed)
    
    def generate(self) -> str:
        number = self._random.randint(self._settings.min_value, self._settings.max_value)
        return f"{self._settings.prefix}{number}"


class SequenceIdGenerator(IdGenerator):
    """Hands out a fixed list of IDs in order. For tests and demos."""
    
    def __init__(self, ids: Iterable[str]):
        self._ids = list(ids)
        self._position = 0
    
    def generate(self) -> str:
        if self._position >= len(self._ids):
            raise IdentifierExhaustedError(self._position)
        depositor_id = self._ids[self._position]
        self._position += 1
        return depositor_id
