"""
Depositor Entity

A depositor is one account: an ID, a name, a raw balance and the
deposit plan chosen at signup.

BALANCE RULES:
- The raw balance starts at 0 and only grows.
- A deposit adds the plan's credited amount for that deposit.
- The reported balance applies the plan again, to the whole raw
  balance, every time it is read. It is never stored.
"""

from decimal import Decimal, Overflow

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from depositbook.errors import BalanceOverflowError, DepositError
from depositbook.models.deposit import DepositorSummary, DepositPlan
from depositbook.services.strategy import DepositStrategy
from depositbook.validation.validator import Amount, to_amount, validate_amount


class Depositor(BaseModel):
    """
    One registered depositor.

    ID, name and strategy are frozen; assigning to them raises a
    ValidationError. The raw balance is private and changes only
    through deposit().
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    depositor_id: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Unique ID, e.g. PZ123456"
    )
    name: str = Field(
        ...,
        frozen=True,
        description="Display name (letters only, checked by the caller)"
    )
    strategy: DepositStrategy = Field(
        ...,
        frozen=True,
        exclude=True,
        description="Shared deposit plan strategy"
    )

    _raw_balance: Decimal = PrivateAttr(default_factory=lambda: Decimal("0"))

    @property
    def plan(self) -> DepositPlan:
        return self.strategy.plan

    @property
    def raw_balance(self) -> Decimal:
        return self._raw_balance

    def reported_balance(self) -> Decimal:
        """
        The plan applied to the whole raw balance.

        Raises:
            AmountTooLargeError: If the plan refuses the raw balance
            BalanceOverflowError: If the plan result cannot be represented
        """
        try:
            return self.strategy.calculate(self._raw_balance)
        except Overflow:
            raise BalanceOverflowError(self.depositor_id, self._raw_balance) from None

    def deposit(self, amount: Amount) -> Decimal:
        """
        Credit a deposit to this account.

        The amount is checked, then transformed by the plan, then added
        to the raw balance. Nothing changes if either step fails.

        Returns:
            The credited amount

        Raises:
            NegativeAmountError: If amount < 0
            InvalidAmountError: If amount is not a finite number
            AmountTooLargeError: If the plan refuses the amount
            AmountOutOfRangeError: If the amount is too large to compute with
            BalanceOverflowError: If the new balance would overflow
        """
        value = to_amount(amount)
        validate_amount(value)
        try:
            credited = self.strategy.calculate(value)
            balance = self._raw_balance + credited
        except Overflow:
            raise BalanceOverflowError(self.depositor_id, value) from None
        self._raw_balance = balance
        return credited

    def to_summary(self) -> DepositorSummary:
        """Listing row; a refused reported balance is reported, not raised."""
        try:
            reported = self.reported_balance()
            error = None
        except DepositError as e:
            reported = None
            error = str(e)

        return DepositorSummary(
            depositor_id=self.depositor_id,
            name=self.name,
            plan=self.plan,
            raw_balance=self._raw_balance,
            reported_balance=reported,
            balance_error=error,
        )
