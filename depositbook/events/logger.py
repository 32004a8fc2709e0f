"""
Event Logger

DESIGN DECISION: Every significant bank action is logged as a
structured event. This provides:
1. Traceability of one console session (shared correlation ID)
2. Debugging capability
3. A visible record of every refused deposit

The event logger:
- Writes JSON lines to stderr, never to the console prompts on stdout
- Keeps nothing in memory or on disk
- Filters by the level from configuration
"""

import logging
import sys
from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

from depositbook.models.events import BankEvent, BankEventBuilder, EventSeverity


LOGGER_NAME = "depositbook"

# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "WARNING") -> None:
    """
    Route depositbook log lines to stderr at the given level.
    
    Safe to call more than once; the handler is replaced, not added.
    """
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in stdlib_logger.handlers[:]:
        stdlib_logger.removeHandler(handler)
    
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(getattr(logging, level.upper()))
    stdlib_logger.propagate = False


class EventLogger:
    """
    Central event logging service.
    
    One instance per console session; every event it writes carries
    the session's correlation ID.
    """
    
    def __init__(
        self,
        correlation_id: Optional[UUID] = None,
        logger: Optional[Any] = None,
    ):
        """
        Initialize event logger.
        
        Args:
            correlation_id: ID stamped on every event. A new one is created if None.
            logger: structlog-style logger. Defaults to the depositbook logger.
        """
        self._correlation_id = (
            correlation_id if correlation_id is not None else create_correlation_id()
        )
        self._logger = logger if logger is not None else structlog.get_logger(LOGGER_NAME)
    
    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id
    
    def log(self, event: BankEvent) -> None:
        """Write an event at its severity."""
        if event.correlation_id is None:
            event = event.model_copy(update={"correlation_id": self._correlation_id})
        log_dict = event.to_log_dict()
        
        if event.severity == EventSeverity.ERROR:
            self._logger.error("bank_event", **log_dict)
        elif event.severity == EventSeverity.WARNING:
            self._logger.warning("bank_event", **log_dict)
        elif event.severity == EventSeverity.DEBUG:
            self._logger.debug("bank_event", **log_dict)
        else:
            self._logger.info("bank_event", **log_dict)
    
    def log_depositor_added(self, depositor_id: str, name: str, plan: str) -> None:
        """Log depositor registration."""
        self.log(BankEventBuilder.depositor_added(
            depositor_id=depositor_id,
            name=name,
            plan=plan,
        ))
    
    def log_identifier_collision(self, depositor_id: str, attempt: int) -> None:
        """Log a generated ID that was already taken."""
        self.log(BankEventBuilder.identifier_collision(
            depositor_id=depositor_id,
            attempt=attempt,
        ))
    
    def log_deposit_applied(self, depositor_id: str, amount, credited) -> None:
        """Log a deposit that changed a balance."""
        self.log(BankEventBuilder.deposit_applied(
            depositor_id=depositor_id,
            amount=amount,
            credited=credited,
        ))
    
    def log_deposit_rejected(
        self,
        depositor_id: str,
        amount,
        reason: str,
        error_message: str,
    ) -> None:
        """Log a deposit that a plan or validation refused."""
        self.log(BankEventBuilder.deposit_rejected(
            depositor_id=depositor_id,
            amount=amount,
            reason=reason,
            error_message=error_message,
        ))
    
    def log_depositor_not_found(self, depositor_id: str) -> None:
        self.log(BankEventBuilder.depositor_not_found(depositor_id=depositor_id))
    
    def log_balance_unavailable(self, depositor_id: str, error_message: str) -> None:
        """Log a reported balance the plan refused to compute."""
        self.log(BankEventBuilder.balance_unavailable(
            depositor_id=depositor_id,
            error_message=error_message,
        ))
    
    def log_session_started(self) -> None:
        self.log(BankEventBuilder.session_started())
    
    def log_session_ended(self, depositor_count: int) -> None:
        self.log(BankEventBuilder.session_ended(depositor_count=depositor_count))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.
    
    Use this at the start of a console session.
    """
    return uuid4()
