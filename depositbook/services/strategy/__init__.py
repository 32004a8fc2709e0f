"""Deposit strategy package."""

from depositbook.services.strategy.interface import DepositStrategy
from depositbook.services.strategy.plans import (
    FixedDeposit,
    NormalDeposit,
    strategy_for,
)

__all__ = [
    "DepositStrategy",
    "FixedDeposit",
    "NormalDeposit",
    "strategy_for",
]
