"""
Event Models for Depositbook

Every significant action of the bank is described by an event
and written to the structured log.

DESIGN DECISION: Events are log lines, not records.
Nothing is stored, so there is no history to query or replay.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator


DESCRIPTION_LIMIT = 500


class BankEventType(str, Enum):
    """Types of events the bank logs."""
    # Registry
    DEPOSITOR_ADDED = "depositor_added"
    IDENTIFIER_COLLISION = "identifier_collision"
    
    # Deposits
    DEPOSIT_APPLIED = "deposit_applied"
    DEPOSIT_REJECTED = "deposit_rejected"
    DEPOSITOR_NOT_FOUND = "depositor_not_found"
    
    # Queries
    BALANCE_UNAVAILABLE = "balance_unavailable"
    
    # Session
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"


class EventSeverity(str, Enum):
    """Severity level for bank events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class BankEvent(BaseModel):
    """A single bank event."""
    
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    event_type: BankEventType
    severity: EventSeverity = EventSeverity.INFO
    
    depositor_id: Optional[str] = Field(
        default=None,
        description="Depositor this event relates to"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID shared by every event of one console session"
    )
    
    description: str = Field(..., max_length=DESCRIPTION_LIMIT)
    details: dict[str, Any] = Field(default_factory=dict)
    
    @field_validator("description", mode="before")
    @classmethod
    def truncate_description(cls, v: Any) -> Any:
        """Descriptions may quote user input; cut them rather than fail."""
        if isinstance(v, str) and len(v) > DESCRIPTION_LIMIT:
            return v[:DESCRIPTION_LIMIT - 3] + "..."
        return v
    
    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "depositor_id": self.depositor_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


class BankEventBuilder:
    """
    Helper class to build bank events with common patterns.
    
    Usage:
        event = BankEventBuilder.depositor_added("PZ123456", "Alice", "normal")
        event = BankEventBuilder.deposit_rejected("PZ123456", amount, "amount_too_large", msg)
    """
    
    @staticmethod
    def depositor_added(
        depositor_id: str,
        name: str,
        plan: str,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.DEPOSITOR_ADDED,
            depositor_id=depositor_id,
            correlation_id=correlation_id,
            description=f"Depositor added: {depositor_id}",
            details={
                "name": name,
                "plan": plan,
            },
        )
    
    @staticmethod
    def identifier_collision(
        depositor_id: str,
        attempt: int,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.IDENTIFIER_COLLISION,
            severity=EventSeverity.WARNING,
            depositor_id=depositor_id,
            correlation_id=correlation_id,
            description=f"Generated ID {depositor_id} already taken",
            details={"attempt": attempt},
        )
    
    @staticmethod
    def deposit_applied(
        depositor_id: str,
        amount: Decimal,
        credited: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.DEPOSIT_APPLIED,
            depositor_id=depositor_id,
            correlation_id=correlation_id,
            description=f"Deposit applied to {depositor_id}",
            details={
                "amount": f"{amount:f}",
                "credited_amount": f"{credited:f}",
            },
        )
    
    @staticmethod
    def deposit_rejected(
        depositor_id: str,
        amount: Any,
        reason: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.DEPOSIT_REJECTED,
            severity=EventSeverity.WARNING,
            depositor_id=depositor_id,
            correlation_id=correlation_id,
            description=f"Deposit to {depositor_id} rejected: {reason}",
            details={
                "amount": str(amount),
                "reason": reason,
                "error_message": error_message,
            },
        )
    
    @staticmethod
    def depositor_not_found(
        depositor_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.DEPOSITOR_NOT_FOUND,
            severity=EventSeverity.WARNING,
            depositor_id=depositor_id,
            correlation_id=correlation_id,
            description=f"No depositor with ID {depositor_id}",
        )
    
    @staticmethod
    def balance_unavailable(
        depositor_id: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.BALANCE_UNAVAILABLE,
            severity=EventSeverity.WARNING,
            depositor_id=depositor_id,
            correlation_id=correlation_id,
            description=f"Reported balance of {depositor_id} could not be computed",
            details={"error_message": error_message},
        )
    
    @staticmethod
    def session_started(correlation_id: Optional[UUID] = None) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.SESSION_STARTED,
            correlation_id=correlation_id,
            description="Console session started",
        )
    
    @staticmethod
    def session_ended(
        depositor_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> BankEvent:
        return BankEvent(
            event_type=BankEventType.SESSION_ENDED,
            correlation_id=correlation_id,
            description="Console session ended",
            details={"depositor_count": depositor_count},
        )
