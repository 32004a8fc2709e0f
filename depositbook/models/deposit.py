"""
Core Data Models for Depositbook

These models define the shapes of everything the bank hands back
to its callers:
1. The deposit plan a depositor signs up for
2. The outcome of a deposit attempt
3. Listing rows and the aggregate total
4. Input validation results

DESIGN DECISION: Failures are returned as data, not raised.
A caller always gets an outcome it has to look at, so a refused
deposit can never be mistaken for an accepted one.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class DepositPlan(str, Enum):
    """
    Deposit plans a depositor can choose at signup.
    
    The plan is fixed for the life of the account.
    """
    NORMAL = "normal"  # Credited amount equals the deposit
    FIXED = "fixed"    # Bonus added to each deposit, capped amount


class DepositErrorKind(str, Enum):
    """Why a deposit was not applied."""
    AMOUNT_TOO_LARGE = "amount_too_large"
    NEGATIVE_AMOUNT = "negative_amount"
    INVALID_AMOUNT = "invalid_amount"
    BALANCE_OVERFLOW = "balance_overflow"
    NOT_FOUND = "not_found"


# =============================================================================
# DEPOSIT OUTCOMES
# =============================================================================

class DepositOutcome(BaseModel):
    """
    Result of depositing to an account by identifier.
    
    `found` tells whether the identifier matched a depositor.
    `applied` tells whether the balance changed. An account can be
    found and still refuse the deposit.
    """
    
    depositor_id: str
    found: bool
    applied: bool
    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount the user asked to deposit"
    )
    credited_amount: Optional[Decimal] = Field(
        default=None,
        description="Amount added to the raw balance after the plan was applied"
    )
    error_kind: Optional[DepositErrorKind] = None
    message: str = Field(
        ...,
        description="Human-readable description of what happened"
    )


# =============================================================================
# LISTING MODELS
# =============================================================================

class DepositorSummary(BaseModel):
    """One row of the depositor listing."""
    
    depositor_id: str
    name: str
    plan: DepositPlan
    raw_balance: Decimal
    reported_balance: Optional[Decimal] = Field(
        default=None,
        description="Plan applied to the raw balance; None if the plan refused it"
    )
    balance_error: Optional[str] = None


class DepositorListing(BaseModel):
    """
    All depositors in registration order.
    
    An empty listing is a state of its own: the console says so
    instead of printing an empty table.
    """
    
    depositors: list[DepositorSummary] = Field(default_factory=list)
    
    @property
    def is_empty(self) -> bool:
        return not self.depositors
    
    def __len__(self) -> int:
        return len(self.depositors)


class TotalDeposits(BaseModel):
    """
    Sum of reported balances across all depositors.
    
    Depositors whose reported balance could not be computed are left
    out of the sum and named in `skipped`.
    """
    
    total: Decimal = Decimal("0")
    counted: int = Field(default=0, ge=0)
    skipped: list[str] = Field(default_factory=list)
    
    @property
    def has_deposits(self) -> bool:
        return self.total != 0


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""
    
    field: str = Field(
        ...,
        description="Input with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'empty', 'not_numeric', 'negative')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """
    Result of checking one piece of console input.
    
    `value` holds the parsed input (a Decimal amount, a DepositPlan,
    a cleaned name) when no error-level issue was found.
    """
    
    field: str
    raw_input: str
    value: Optional[Any] = None
    issues: list[ValidationIssue] = Field(default_factory=list)
    
    @property
    def is_valid(self) -> bool:
        return not self.has_errors
    
    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)
    
    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")
    
    @property
    def warnings(self) -> list[str]:
        return [issue.message for issue in self.issues if issue.severity == "warning"]



class RegistrationResult(BaseModel):
    """Result of registering a new depositor from console input."""
    
    success: bool
    depositor_id: Optional[str] = None
    name: str
    plan: Optional[DepositPlan] = None
    issues: list[ValidationIssue] = Field(default_factory=list)
    message: str
