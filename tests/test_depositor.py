"""Tests for the Depositor entity."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from depositbook.depositor import Depositor
from depositbook.errors import (
    AmountOutOfRangeError,
    AmountTooLargeError,
    BalanceOverflowError,
    NegativeAmountError,
)
from depositbook.models.deposit import DepositPlan
from depositbook.services.strategy import FixedDeposit, NormalDeposit


@pytest.fixture
def normal():
    return Depositor(depositor_id="PZ100001", name="Alice", strategy=NormalDeposit())


@pytest.fixture
def fixed():
    return Depositor(depositor_id="PZ100002", name="Bob", strategy=FixedDeposit())


class TestDepositorCreation:
    """Tests for building a Depositor."""
    
    def test_starts_with_zero_balance(self, normal):
        """New accounts hold nothing."""
        assert normal.raw_balance == Decimal("0")
        assert normal.reported_balance() == Decimal("0")
        assert normal.plan == DepositPlan.NORMAL
    
    def test_fixed_reports_bonus_on_empty_account(self, fixed):
        """The Fixed bonus shows even before the first deposit."""
        assert fixed.raw_balance == Decimal("0")
        assert fixed.reported_balance() == Decimal("100")
    
    def test_strategy_must_be_a_strategy(self):
        """A plan name is not accepted in place of a strategy."""
        with pytest.raises(ValidationError):
            Depositor(depositor_id="PZ100001", name="Alice", strategy="normal")
    
    def test_identifier_is_frozen(self, normal):
        """The ID cannot be reassigned."""
        with pytest.raises(ValidationError):
            normal.depositor_id = "PZ999999"
        assert normal.depositor_id == "PZ100001"
    
    def test_strategy_is_frozen(self, normal):
        """The plan cannot be changed after signup."""
        with pytest.raises(ValidationError):
            normal.strategy = FixedDeposit()
        assert normal.plan == DepositPlan.NORMAL
    
    def test_dump_leaves_out_strategy(self, normal):
        """Serialised depositors carry no strategy object or balance."""
        assert normal.model_dump() == {"depositor_id": "PZ100001", "name": "Alice"}


class TestDeposit:
    """Tests for crediting deposits."""
    
    def test_normal_deposit_adds_amount(self, normal):
        """Normal deposits are credited as they are."""
        credited = normal.deposit(500)
        assert credited == Decimal("500")
        assert normal.raw_balance == Decimal("500")
        assert normal.reported_balance() == Decimal("500")
    
    def test_fixed_deposit_adds_credited_increment(self, fixed):
        """Fixed deposits add the bonus to the raw balance."""
        credited = fixed.deposit(200)
        assert credited == Decimal("300")
        assert fixed.raw_balance == Decimal("300")
        # The plan is applied again when the balance is read
        assert fixed.reported_balance() == Decimal("400")
    
    def test_balance_accumulates(self, normal):
        """Text, Decimal and float amounts all add up exactly."""
        normal.deposit("10.25")
        normal.deposit(Decimal("0.75"))
        normal.deposit(0.1)
        assert normal.raw_balance == Decimal("11.1")
    
    def test_negative_deposit_changes_nothing(self, normal):
        """A negative deposit raises and leaves the balance alone."""
        normal.deposit(50)
        with pytest.raises(NegativeAmountError):
            normal.deposit(-1)
        assert normal.raw_balance == Decimal("50")
    
    def test_too_large_deposit_changes_nothing(self, fixed):
        """A deposit above the Fixed ceiling raises and changes nothing."""
        fixed.deposit(100)
        with pytest.raises(AmountTooLargeError):
            fixed.deposit(999999999)
        assert fixed.raw_balance == Decimal("200")
    
    def test_out_of_range_amount_changes_nothing(self, normal):
        """Amounts beyond the Decimal exponent limit are refused up front."""
        with pytest.raises(AmountOutOfRangeError):
            normal.deposit("1e1000000")
        assert normal.raw_balance == Decimal("0")
    
    def test_overflowing_balance_changes_nothing(self, normal):
        """A deposit whose sum would overflow is refused."""
        normal.deposit("9e999999")
        with pytest.raises(BalanceOverflowError):
            normal.deposit("9e999999")
        assert normal.raw_balance == Decimal("9e999999")
    
    def test_reported_balance_refused_above_ceiling(self, fixed):
        """A raw balance past the ceiling cannot be reported."""
        fixed.deposit(600000)
        fixed.deposit(600000)
        assert fixed.raw_balance == Decimal("1200200")
        with pytest.raises(AmountTooLargeError):
            fixed.reported_balance()


class TestSummary:
    """Tests for listing rows."""
    
    def test_summary_of_healthy_account(self, fixed):
        """A summary carries both raw and reported balances."""
        fixed.deposit(200)
        summary = fixed.to_summary()
        assert summary.depositor_id == "PZ100002"
        assert summary.name == "Bob"
        assert summary.plan == DepositPlan.FIXED
        assert summary.raw_balance == Decimal("300")
        assert summary.reported_balance == Decimal("400")
        assert summary.balance_error is None
    
    def test_summary_reports_refused_balance(self, fixed):
        """A refused balance becomes an error text, not an exception."""
        fixed.deposit(600000)
        fixed.deposit(600000)
        summary = fixed.to_summary()
        assert summary.reported_balance is None
        assert "maximum deposit amount" in summary.balance_error
