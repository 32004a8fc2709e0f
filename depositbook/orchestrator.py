"""
Main Orchestrator for Depositbook

This module ties together all the components and defines the
flows behind each console menu entry:
1. Register (name + plan choice -> validate -> add depositor)
2. Deposit (ID + amount text -> validate -> deposit)
3. List and total

DESIGN DECISION: The orchestrator enforces the boundaries:
- Nothing reaches the bank before its input is validated
- No failure escapes as an exception to the console loop
- Every step is logged under the session's correlation ID
"""

from decimal import Decimal
from typing import Optional

from depositbook.bank import Bank
from depositbook.config import Settings, get_settings
from depositbook.events import EventLogger, create_correlation_id
from depositbook.models.deposit import (
    DepositErrorKind,
    DepositorListing,
    DepositOutcome,
    RegistrationResult,
    TotalDeposits,
)
from depositbook.services.ids import IdGenerator, RandomIdGenerator
from depositbook.validation import DepositInputValidator


class DepositorSession:
    """
    One console session over one bank.

    Takes raw console text, validates it, and hands typed values
    to the bank.
    """

    def __init__(
        self,
        bank: Optional[Bank] = None,
        validator: Optional[DepositInputValidator] = None,
        event_logger: Optional[EventLogger] = None,
    ):
        self._event_logger = event_logger if event_logger is not None else EventLogger()
        self._bank = bank if bank is not None else Bank(event_logger=self._event_logger)
        self._validator = validator if validator is not None else DepositInputValidator()

    @property
    def bank(self) -> Bank:
        return self._bank

    @property
    def validator(self) -> DepositInputValidator:
        return self._validator

    def start(self) -> None:
        self._event_logger.log_session_started()

    def end(self) -> None:
        self._event_logger.log_session_ended(depositor_count=len(self._bank))

    def register_depositor(
        self,
        name_text: str,
        plan_choice: str,
    ) -> RegistrationResult:
        """
        Register a depositor from console input.

        Args:
            name_text: Name as typed
            plan_choice: "1" / "2" or "normal" / "fixed"

        Returns:
            RegistrationResult; on failure, `issues` says what to fix
        """
        name_result = self._validator.validate_name(name_text)
        plan_result = self._validator.validate_plan_choice(plan_choice)
        issues = name_result.issues + plan_result.issues

        if name_result.has_errors or plan_result.has_errors:
            return RegistrationResult(
                success=False,
                name=name_text,
                plan=plan_result.value,
                issues=issues,
                message="\n".join(i.message for i in issues),
            )

        depositor_id = self._bank.add_depositor(name_result.value, plan_result.value)
        return RegistrationResult(
            success=True,
            depositor_id=depositor_id,
            name=name_result.value,
            plan=plan_result.value,
            message=f"Depositor added successfully! User ID: {depositor_id}",
        )

    def make_deposit(
        self,
        depositor_id: str,
        amount_text: str,
    ) -> DepositOutcome:
        """
        Deposit an amount typed at the console.

        Invalid amount text never reaches the bank: the outcome is
        returned unapplied with the validation message.
        """
        id_result = self._validator.validate_identifier(depositor_id)
        depositor_id = id_result.value
        amount_result = self._validator.validate_amount_text(amount_text)

        if amount_result.has_errors:
            issue = amount_result.issues[0]
            kind = (
                DepositErrorKind.NEGATIVE_AMOUNT
                if issue.issue_type == "negative"
                else DepositErrorKind.INVALID_AMOUNT
            )
            return DepositOutcome(
                depositor_id=depositor_id,
                found=depositor_id in self._bank,
                applied=False,
                error_kind=kind,
                message=self._validator.get_user_friendly_summary(amount_result),
            )

        outcome = self._bank.deposit_to_account(depositor_id, amount_result.value)
        if not outcome.found and id_result.warnings:
            message = "\n".join([outcome.message] + id_result.warnings)
            outcome = outcome.model_copy(update={"message": message})
        return outcome

    def reported_balance(self, depositor_id: str) -> Decimal:
        """
        Reported balance of one depositor.

        Raises:
            DepositorNotFoundError: If no depositor has this ID
        """
        return self._bank.reported_balance(depositor_id)

    def list_depositors(self) -> DepositorListing:
        return self._bank.list_depositors()

    def total_deposits(self) -> TotalDeposits:
        return self._bank.total_deposits()


def create_app_components(
    settings: Optional[Settings] = None,
    id_generator: Optional[IdGenerator] = None,
    seed: Optional[int] = None,
) -> DepositorSession:
    """
    Factory function to create all application components.

    Args:
        settings: Application settings. Defaults to get_settings().
        id_generator: ID source. Defaults to a RandomIdGenerator.
        seed: Seed for the default RandomIdGenerator.

    Returns:
        A DepositorSession over a fresh, empty bank
    """
    settings = settings if settings is not None else get_settings()
    id_settings = settings.ids

    if id_generator is None:
        id_generator = RandomIdGenerator(id_settings, seed=seed)

    event_logger = EventLogger(correlation_id=create_correlation_id())
    bank = Bank(
        id_generator=id_generator,
        event_logger=event_logger,
        id_settings=id_settings,
    )
    validator = DepositInputValidator(id_settings)

    return DepositorSession(
        bank=bank,
        validator=validator,
        event_logger=event_logger,
    )
