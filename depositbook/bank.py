"""
Bank - the depositor registry

The bank owns every depositor of the session. It is the only place
that adds accounts, and it is where a refused deposit is turned into
an outcome instead of an exception.

DESIGN DECISION: The registry is append-only. Depositors are never
removed; their IDs are never reused within a session.
"""

from decimal import MAX_EMAX, Decimal, localcontext
from typing import Iterator, Optional, Union

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt

from depositbook.config import IdentifierSettings, get_settings
from depositbook.depositor import Depositor
from depositbook.errors import (
    AmountTooLargeError,
    BalanceOverflowError,
    DepositError,
    DepositorNotFoundError,
    IdentifierCollisionError,
    IdentifierExhaustedError,
    NegativeAmountError,
)
from depositbook.events import EventLogger
from depositbook.models.deposit import (
    DepositErrorKind,
    DepositorListing,
    DepositOutcome,
    DepositPlan,
    TotalDeposits,
)
from depositbook.services.ids import IdGenerator, RandomIdGenerator
from depositbook.services.strategy import DepositStrategy, strategy_for
from depositbook.validation.validator import Amount, format_amount, to_amount


class Bank:
    """
    Registry of depositors.

    Depositors are kept in registration order and looked up by ID.
    """

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        event_logger: Optional[EventLogger] = None,
        id_settings: Optional[IdentifierSettings] = None,
    ):
        """
        Initialize the bank.

        Args:
            id_generator: Source of new IDs. Defaults to RandomIdGenerator.
            event_logger: Where bank events go. Defaults to a fresh EventLogger.
            id_settings: Collision retry limit. Defaults to the application settings.
        """
        self._id_settings = id_settings if id_settings is not None else get_settings().ids
        self._id_generator = (
            id_generator if id_generator is not None
            else RandomIdGenerator(self._id_settings)
        )
        self._events = event_logger if event_logger is not None else EventLogger()
        self._depositors: dict[str, Depositor] = {}

    def __len__(self) -> int:
        return len(self._depositors)

    def __iter__(self) -> Iterator[Depositor]:
        return iter(list(self._depositors.values()))

    def __contains__(self, depositor_id: object) -> bool:
        return depositor_id in self._depositors

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def _allocate_identifier(self) -> str:
        """
        Draw IDs until one is free.

        Raises:
            IdentifierExhaustedError: If every attempt collided
        """
        max_attempts = self._id_settings.max_attempts
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(max_attempts),
                retry=retry_if_exception_type(IdentifierCollisionError),
                reraise=True,
            ):
                with attempt:
                    candidate = self._id_generator.generate()
                    if candidate in self._depositors:
                        self._events.log_identifier_collision(
                            depositor_id=candidate,
                            attempt=attempt.retry_state.attempt_number,
                        )
                        raise IdentifierCollisionError(candidate)
        except IdentifierCollisionError:
            raise IdentifierExhaustedError(max_attempts) from None
        return candidate

    def add_depositor(
        self,
        name: str,
        strategy: Union[DepositStrategy, DepositPlan, str],
    ) -> str:
        """
        Register a new depositor with a zero balance.

        The caller is responsible for the name being letters only.

        Args:
            name: Display name
            strategy: A strategy instance, or the plan whose shared
                      strategy should be used

        Returns:
            The new depositor's ID
        """
        if not isinstance(strategy, DepositStrategy):
            strategy = strategy_for(DepositPlan(strategy))

        depositor_id = self._allocate_identifier()
        depositor = Depositor(
            depositor_id=depositor_id,
            name=name,
            strategy=strategy,
        )
        self._depositors[depositor_id] = depositor

        self._events.log_depositor_added(
            depositor_id=depositor_id,
            name=name,
            plan=depositor.plan.value,
        )
        return depositor_id

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_depositor(self, depositor_id: str) -> Optional[Depositor]:
        """Return the depositor with this ID, or None."""
        return self._depositors.get(depositor_id)

    def require_depositor(self, depositor_id: str) -> Depositor:
        """
        Return the depositor with this ID.

        Raises:
            DepositorNotFoundError: If no depositor has this ID
        """
        depositor = self.get_depositor(depositor_id)
        if depositor is None:
            raise DepositorNotFoundError(depositor_id)
        return depositor

    def reported_balance(self, depositor_id: str) -> Decimal:
        """
        Reported balance of one depositor.

        Raises:
            DepositorNotFoundError: If no depositor has this ID
            AmountTooLargeError: If the plan refuses the raw balance
        """
        return self.require_depositor(depositor_id).reported_balance()

    # =========================================================================
    # DEPOSITS
    # =========================================================================

    def deposit_to_account(self, depositor_id: str, amount: Amount) -> DepositOutcome:
        """
        Deposit to the account with the given ID.

        A refused deposit does not raise: the outcome says the account
        was found but the deposit was not applied, and why.

        Returns:
            DepositOutcome with found=False if no depositor has this ID
        """
        depositor = self.get_depositor(depositor_id)
        if depositor is None:
            self._events.log_depositor_not_found(depositor_id)
            return DepositOutcome(
                depositor_id=depositor_id,
                found=False,
                applied=False,
                error_kind=DepositErrorKind.NOT_FOUND,
                message=str(DepositorNotFoundError(depositor_id)),
            )

        try:
            credited = depositor.deposit(amount)
        except DepositError as e:
            if isinstance(e, AmountTooLargeError):
                kind = DepositErrorKind.AMOUNT_TOO_LARGE
            elif isinstance(e, NegativeAmountError):
                kind = DepositErrorKind.NEGATIVE_AMOUNT
            elif isinstance(e, BalanceOverflowError):
                kind = DepositErrorKind.BALANCE_OVERFLOW
            else:
                kind = DepositErrorKind.INVALID_AMOUNT

            self._events.log_deposit_rejected(
                depositor_id=depositor_id,
                amount=amount,
                reason=kind.value,
                error_message=str(e),
            )
            return DepositOutcome(
                depositor_id=depositor_id,
                found=True,
                applied=False,
                amount=getattr(e, "amount", None),
                error_kind=kind,
                message=str(e),
            )

        amount_value = to_amount(amount)
        self._events.log_deposit_applied(
            depositor_id=depositor_id,
            amount=amount_value,
            credited=credited,
        )
        return DepositOutcome(
            depositor_id=depositor_id,
            found=True,
            applied=True,
            amount=amount_value,
            credited_amount=credited,
            message=f"Deposit of {format_amount(amount_value)} made to account ID: {depositor_id}",
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def total_deposits(self) -> TotalDeposits:
        """
        Sum of reported balances across all depositors.

        A depositor whose plan refuses its raw balance is skipped and
        logged; the rest are still summed.
        """
        total = Decimal("0")
        counted = 0
        skipped = []

        # Each balance is within the default Emax, their sum may not be.
        with localcontext() as ctx:
            ctx.Emax = MAX_EMAX
            for depositor in self._depositors.values():
                try:
                    total += depositor.reported_balance()
                    counted += 1
                except DepositError as e:
                    skipped.append(depositor.depositor_id)
                    self._events.log_balance_unavailable(
                        depositor_id=depositor.depositor_id,
                        error_message=str(e),
                    )

        return TotalDeposits(total=total, counted=counted, skipped=skipped)

    def list_depositors(self) -> DepositorListing:
        """All depositors in registration order."""
        summaries = []
        for depositor in self._depositors.values():
            summary = depositor.to_summary()
            if summary.balance_error is not None:
                self._events.log_balance_unavailable(
                    depositor_id=depositor.depositor_id,
                    error_message=summary.balance_error,
                )
            summaries.append(summary)
        return DepositorListing(depositors=summaries)
