"""Tests for the session flows behind the console menu."""

from decimal import Decimal

import pytest

from depositbook.bank import Bank
from depositbook.config import get_settings
from depositbook.errors import DepositorNotFoundError
from depositbook.models.deposit import DepositErrorKind, DepositPlan
from depositbook.orchestrator import DepositorSession, create_app_components
from depositbook.services.ids import SequenceIdGenerator


class TestSessionWiring:
    """Tests for the components a session is built from."""
    
    def test_keeps_the_given_empty_bank(self, bank, session):
        """An injected bank is used even while it holds no depositors."""
        assert len(bank) == 0
        assert session.bank is bank
    
    def test_builds_its_own_bank_when_none_given(self, event_logger):
        """Without a bank, the session creates one."""
        session = DepositorSession(event_logger=event_logger)
        assert isinstance(session.bank, Bank)
        assert len(session.bank) == 0


class TestRegisterDepositor:
    """Tests for registering from console text."""
    
    def test_registers_valid_input(self, session):
        """Valid name and plan register a depositor under the next ID."""
        result = session.register_depositor("Alice", "1")
        assert result.success is True
        assert result.depositor_id == "PZ100001"
        assert result.plan == DepositPlan.NORMAL
        assert result.message == "Depositor added successfully! User ID: PZ100001"
        assert "PZ100001" in session.bank
    
    def test_rejects_bad_name_without_touching_the_bank(self, session):
        """An invalid name registers nothing."""
        result = session.register_depositor("R2D2", "2")
        assert result.success is False
        assert result.depositor_id is None
        assert result.issues[0].field == "name"
        assert len(session.bank) == 0
    
    def test_reports_every_problem_at_once(self, session):
        """Name and plan problems are reported together."""
        result = session.register_depositor("", "7")
        assert {issue.field for issue in result.issues} == {"name", "plan"}
        assert "Invalid strategy choice" in result.message


class TestMakeDeposit:
    """Tests for depositing from console text."""
    
    def test_applies_valid_amount(self, session):
        """A valid amount reaches the account."""
        session.register_depositor("Bob", "2")
        
        outcome = session.make_deposit("PZ100001", "200")
        
        assert outcome.applied is True
        assert outcome.credited_amount == Decimal("300")
        assert session.reported_balance("PZ100001") == Decimal("400")
    
    def test_exponent_amount_is_shown_plainly(self, session):
        """Amounts typed with an exponent are echoed in plain digits."""
        session.register_depositor("Alice", "1")
        outcome = session.make_deposit("PZ100001", "1e3")
        assert outcome.message == "Deposit of 1000 made to account ID: PZ100001"
    
    @pytest.mark.parametrize("text, kind", [
        ("abc", DepositErrorKind.INVALID_AMOUNT),
        ("-10", DepositErrorKind.NEGATIVE_AMOUNT),
        ("inf", DepositErrorKind.INVALID_AMOUNT),
        ("1e1000000", DepositErrorKind.INVALID_AMOUNT),
    ])
    def test_invalid_amount_text_never_reaches_the_bank(self, session, text, kind):
        """Bad amount text is refused before the bank sees it."""
        session.register_depositor("Alice", "1")
        
        outcome = session.make_deposit("PZ100001", text)
        
        assert outcome.found is True
        assert outcome.applied is False
        assert outcome.error_kind == kind
        assert session.bank.get_depositor("PZ100001").raw_balance == Decimal("0")
    
    def test_overflowing_balance(self, session):
        """A deposit that would overflow the balance is refused."""
        session.register_depositor("Alice", "1")
        session.make_deposit("PZ100001", "9e999999")
        
        outcome = session.make_deposit("PZ100001", "9e999999")
        
        assert outcome.applied is False
        assert outcome.error_kind == DepositErrorKind.BALANCE_OVERFLOW
    
    def test_too_large_amount(self, session):
        """Fixed plan ceiling is enforced."""
        session.register_depositor("Bob", "fixed")
        outcome = session.make_deposit("PZ100001", "1000000.5")
        assert outcome.found is True
        assert outcome.error_kind == DepositErrorKind.AMOUNT_TOO_LARGE
    
    def test_unknown_well_formed_identifier(self, session):
        """A well-formed unknown ID gets the plain not-found message."""
        outcome = session.make_deposit("PZ000000", "10")
        assert outcome.found is False
        assert outcome.message == "No depositor found with the ID: PZ000000"
    
    def test_malformed_identifier_gets_a_hint(self, session):
        """A malformed unknown ID also gets a format hint."""
        outcome = session.make_deposit("alice", "10")
        assert outcome.found is False
        assert "does not look like a depositor ID" in outcome.message
    
    def test_unknown_balance_lookup_raises(self, session):
        """Balance lookup of an unknown ID raises."""
        with pytest.raises(DepositorNotFoundError):
            session.reported_balance("PZ000000")


class TestSessionQueries:
    """Tests for listing, totals and session events."""
    
    def test_list_and_total(self, session):
        """Listing and total reflect the session's deposits."""
        session.register_depositor("Alice", "1")
        session.register_depositor("Bob", "2")
        session.make_deposit("PZ100001", "500")
        session.make_deposit("PZ100002", "200")
        
        assert len(session.list_depositors()) == 2
        assert session.total_deposits().total == Decimal("900")
    
    def test_start_and_end_are_logged(self, session, recorder):
        """Session boundaries are logged, the end with the depositor count."""
        session.start()
        session.register_depositor("Alice", "1")
        session.end()
        types = recorder.event_types()
        assert types[0] == "session_started"
        assert types[-1] == "session_ended"
        assert recorder.records[-1][2]["details"] == {"depositor_count": 1}
    
    def test_events_share_the_session_correlation_id(self, session, recorder, event_logger):
        """Every event of a session carries one correlation ID."""
        session.start()
        session.register_depositor("Alice", "1")
        ids = {fields["correlation_id"] for _, _, fields in recorder.records}
        assert ids == {str(event_logger.correlation_id)}


class TestCreateAppComponents:
    """Tests for the application factory."""
    
    def test_builds_an_empty_session(self):
        """The factory starts from an empty bank."""
        session = create_app_components()
        assert isinstance(session, DepositorSession)
        assert len(session.bank) == 0
        assert session.list_depositors().is_empty
    
    def test_uses_given_id_generator(self):
        """A supplied generator is used for new IDs."""
        session = create_app_components(id_generator=SequenceIdGenerator(["PZ555555"]))
        assert session.register_depositor("Alice", "1").depositor_id == "PZ555555"
    
    def test_seed_makes_ids_reproducible(self):
        """The same seed gives the same IDs."""
        first = create_app_components(settings=get_settings(), seed=11)
        second = create_app_components(settings=get_settings(), seed=11)
        assert (
            first.register_depositor("Alice", "1").depositor_id
            == second.register_depositor("Alice", "1").depositor_id
        )
