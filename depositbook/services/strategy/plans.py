"""
Deposit Plans

Normal: the credited amount is the deposit itself.
Fixed:  a bonus is added to every deposit, up to a ceiling.

Strategies are built once per configuration and shared.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from depositbook.config import PlanSettings, get_settings
from depositbook.errors import AmountTooLargeError
from depositbook.models.deposit import DepositPlan
from depositbook.services.strategy.interface import DepositStrategy
from depositbook.validation.validator import Amount, format_amount, to_amount


class NormalDeposit(DepositStrategy):
    """Credits exactly what was deposited. Never refuses."""
    
    plan = DepositPlan.NORMAL
    
    def calculate(self, amount: Amount) -> Decimal:
        return to_amount(amount)
    
    def describe(self) -> str:
        return "Normal (no bonus, no limit)"


class FixedDeposit(DepositStrategy):
    """
    Adds a fixed bonus to every deposit.
    
    Amounts above the ceiling are refused outright. The ceiling is
    checked before the bonus is added.
    """
    
    plan = DepositPlan.FIXED
    
    def __init__(
        self,
        bonus: Amount = Decimal("100"),
        ceiling: Amount = Decimal("1000000"),
    ):
        self._bonus = to_amount(bonus)
        self._ceiling = to_amount(ceiling)
    
    @property
    def bonus(self) -> Decimal:
        return self._bonus
    
    @property
    def ceiling(self) -> Decimal:
        return self._ceiling
    
    def calculate(self, amount: Amount) -> Decimal:
        value = to_amount(amount)
        if value > self._ceiling:
            raise AmountTooLargeError(value, self._ceiling)
        return value + self._bonus
    
    def describe(self) -> str:
        return (
            f"Fixed (+{format_amount(self._bonus)} per deposit, "
            f"max {format_amount(self._ceiling)})"
        )
    
    def __repr__(self) -> str:
        return f"FixedDeposit(bonus={self._bonus!s}, ceiling={self._ceiling!s})"


@lru_cache()
def _shared_strategies(bonus: Decimal, ceiling: Decimal) -> dict[DepositPlan, DepositStrategy]:
    return {
        DepositPlan.NORMAL: NormalDeposit(),
        DepositPlan.FIXED: FixedDeposit(bonus=bonus, ceiling=ceiling),
    }


def strategy_for(
    plan: DepositPlan,
    settings: Optional[PlanSettings] = None,
) -> DepositStrategy:
    """
    Get the shared strategy instance for a plan.
    
    Args:
        plan: The plan chosen at signup
        settings: Fixed plan constants. Defaults to the application settings.
    """
    settings = settings if settings is not None else get_settings().plans
    return _shared_strategies(settings.bonus, settings.ceiling)[DepositPlan(plan)]
