"""Services package."""

from depositbook.services.ids import (
    IdGenerator,
    RandomIdGenerator,
    SequenceIdGenerator,
)
from depositbook.services.strategy import (
    DepositStrategy,
    FixedDeposit,
    NormalDeposit,
    strategy_for,
)

__all__ = [
    # ID generation
    "IdGenerator",
    "RandomIdGenerator",
    "SequenceIdGenerator",
    # Deposit strategies
    "DepositStrategy",
    "FixedDeposit",
    "NormalDeposit",
    "strategy_for",
]
