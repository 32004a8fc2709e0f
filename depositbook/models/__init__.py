"""
Data Models Package

This package contains all Pydantic models used in Depositbook.
All data handed back by the bank conforms to these schemas.
"""

from depositbook.models.deposit import (
    DepositErrorKind,
    DepositOutcome,
    DepositorListing,
    DepositorSummary,
    DepositPlan,
    RegistrationResult,
    TotalDeposits,
    ValidationIssue,
    ValidationResult,
)
from depositbook.models.events import (
    BankEvent,
    BankEventBuilder,
    BankEventType,
    EventSeverity,
)

__all__ = [
    # Deposit models
    "DepositErrorKind",
    "DepositOutcome",
    "DepositorListing",
    "DepositorSummary",
    "DepositPlan",
    "RegistrationResult",
    "TotalDeposits",
    "ValidationIssue",
    "ValidationResult",
    # Event models
    "BankEvent",
    "BankEventBuilder",
    "BankEventType",
    "EventSeverity",
]
