"""ID generation package."""

from depositbook.services.ids.generator import (
    IdGenerator,
    RandomIdGenerator,
    SequenceIdGenerator,
)

__all__ = [
    "IdGenerator",
    "RandomIdGenerator",
    "SequenceIdGenerator",
]
