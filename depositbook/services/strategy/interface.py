"""
Abstract Deposit Strategy Interface

DESIGN DECISION: A deposit plan is a strategy object.
This allows us to:
1. Add new plans without touching accounts or the bank
2. Share one stateless instance between every account on a plan
3. Test each plan in isolation

A strategy only transforms amounts. It never holds balances.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from depositbook.models.deposit import DepositPlan
from depositbook.validation.validator import Amount


class DepositStrategy(ABC):
    """
    Abstract interface for deposit calculation policies.
    
    Implementations must be stateless: the same input always gives
    the same output, whichever account asks.
    """
    
    plan: DepositPlan
    
    @abstractmethod
    def calculate(self, amount: Amount) -> Decimal:
        """
        Transform a raw amount into the amount to credit.
        
        Args:
            amount: Non-negative amount to transform
            
        Returns:
            The credited amount
            
        Raises:
            AmountTooLargeError: If the plan does not accept the amount
        """
        pass
    
    @abstractmethod
    def describe(self) -> str:
        """Short plan description for display."""
        pass
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
