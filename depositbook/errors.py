"""
Exception hierarchy for Depositbook.

Every error carries a message that can be shown to the user as-is.
"""

from decimal import Decimal
from typing import Optional


class DepositbookError(Exception):
    """Base exception for all Depositbook errors."""
    pass


# =============================================================================
# DEPOSIT ERRORS
# =============================================================================

class DepositError(DepositbookError):
    """A deposit amount was refused."""
    pass


class NegativeAmountError(DepositError):
    """Deposit amount is below zero."""

    def __init__(self, amount: Optional[Decimal] = None):
        self.amount = amount
        super().__init__("Deposit amount cannot be negative")


class AmountTooLargeError(DepositError):
    """Deposit amount exceeds the ceiling of the depositor's plan."""

    def __init__(self, amount: Decimal, ceiling: Decimal):
        self.amount = amount
        self.ceiling = ceiling
        super().__init__(
            f"The maximum deposit amount for the fixed account is {ceiling:,f}. "
            "Please deposit less."
        )


class InvalidAmountError(DepositError):
    """Amount is not a finite number."""

    def __init__(self, value: object, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid amount: {value!r} is not a finite number")


class AmountOutOfRangeError(InvalidAmountError):
    """Amount is finite but its exponent is beyond what Decimal arithmetic allows."""

    def __init__(self, value: object):
        super().__init__(value, "Invalid amount: the number is too large")


class BalanceOverflowError(DepositError):
    """A balance would go past the Decimal exponent limit."""

    def __init__(self, depositor_id: str, amount: Decimal):
        self.depositor_id = depositor_id
        self.amount = amount
        super().__init__(
            f"Balance of account {depositor_id} would be too large to represent"
        )


# =============================================================================
# REGISTRY ERRORS
# =============================================================================

class RegistryError(DepositbookError):
    """Base exception for depositor registry operations."""
    pass


class DepositorNotFoundError(RegistryError):
    """No depositor is registered under the given identifier."""

    def __init__(self, depositor_id: str):
        self.depositor_id = depositor_id
        super().__init__(f"No depositor found with the ID: {depositor_id}")


class IdentifierCollisionError(RegistryError):
    """A generated identifier is already taken."""

    def __init__(self, depositor_id: str):
        self.depositor_id = depositor_id
        super().__init__(f"Identifier {depositor_id} is already in use")


class IdentifierExhaustedError(RegistryError):
    """No free identifier could be generated."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate a unique depositor ID after {attempts} attempts"
        )
