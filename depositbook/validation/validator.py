"""
Input Validation

DESIGN DECISION: Validation happens at two levels:

LEVEL 1 - PURE CHECKS:
- validate_amount: an amount must not be negative
- is_valid_name: a name is letters only
- is_numeric: a text is a complete floating-point number
These are consulted by the domain objects themselves.

LEVEL 2 - CONSOLE INPUT:
- DepositInputValidator turns raw console text into typed values
- Every problem becomes a ValidationIssue the user can read
- The console re-prompts until the input is valid

IMPORTANT: Validation NEVER silently fixes issues.
It reports them so the user can type the value again.
"""

import re
from decimal import Decimal, InvalidOperation, getcontext
from typing import Optional, Union

from depositbook.config import IdentifierSettings, get_settings
from depositbook.errors import (
    AmountOutOfRangeError,
    InvalidAmountError,
    NegativeAmountError,
)
from depositbook.models.deposit import (
    DepositPlan,
    ValidationIssue,
    ValidationResult,
)


Amount = Union[Decimal, int, float, str]

PLAN_CHOICES = {
    "1": DepositPlan.NORMAL,
    "2": DepositPlan.FIXED,
    DepositPlan.NORMAL.value: DepositPlan.NORMAL,
    DepositPlan.FIXED.value: DepositPlan.FIXED,
}


# =============================================================================
# AMOUNT HELPERS
# =============================================================================

def to_amount(value: Amount) -> Decimal:
    """
    Convert a number or numeric text to a finite Decimal.
    
    Floats go through str() so 0.1 stays 0.1. Amounts whose exponent
    is beyond the context Emax are refused; arithmetic on them would
    raise decimal.Overflow.
    
    Raises:
        InvalidAmountError: If the value is not a finite number
        AmountOutOfRangeError: If the value is too large to compute with
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, float):
            amount = Decimal(str(value))
        elif isinstance(value, (int, str)):
            amount = Decimal(value.strip() if isinstance(value, str) else value)
        else:
            raise InvalidAmountError(value)
    except InvalidOperation:
        raise InvalidAmountError(value) from None
    
    if not amount.is_finite():
        raise InvalidAmountError(value)
    if amount.adjusted() > getcontext().Emax:
        raise AmountOutOfRangeError(value)
    return amount


def format_amount(amount: Decimal) -> str:
    """Plain fixed-point text, no exponent (1E+3 -> 1000)."""
    return f"{amount:f}"


# =============================================================================
# PURE CHECKS
# =============================================================================

def validate_amount(amount: Amount) -> None:
    """
    Check that an amount is not negative.
    
    There is no upper bound here; a plan may impose its own.
    
    Raises:
        NegativeAmountError: If amount < 0
        InvalidAmountError: If amount is not a finite number
    """
    value = to_amount(amount)
    if value < 0:
        raise NegativeAmountError(value)


def is_valid_name(text: str) -> bool:
    """
    True if every character of `text` is a letter.
    
    The empty string passes: it has no character that is not a letter.
    """
    return all(c.isalpha() for c in text)


def is_numeric(text: str) -> bool:
    """
    True if the whole of `text` reads as a floating-point number.
    
    Leading whitespace is skipped, anything after the number
    (trailing whitespace included) makes the text non-numeric.
    """
    if not text or text != text.rstrip() or "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


# =============================================================================
# CONSOLE INPUT VALIDATION
# =============================================================================

class DepositInputValidator:
    """
    Validates raw console input before it reaches the bank.
    
    Each validate_* method returns a ValidationResult whose `value`
    holds the parsed input when valid.
    """
    
    def __init__(
        self,
        id_settings: Optional[IdentifierSettings] = None,
    ):
        """
        Initialize validator.
        
        Args:
            id_settings: Identifier format to check against.
                        Defaults to the application settings.
        """
        self._id_settings = id_settings if id_settings is not None else get_settings().ids
        self._id_pattern = re.compile(self._id_settings.pattern)
    
    def validate_name(self, text: str) -> ValidationResult:
        """Depositor names are letters only and not empty."""
        issues = []
        name = text.strip()
        
        if not name:
            issues.append(ValidationIssue(
                field="name",
                issue_type="empty",
                message="Name cannot be empty. Please try again.",
                severity="error",
            ))
        elif not is_valid_name(name):
            issues.append(ValidationIssue(
                field="name",
                issue_type="invalid_characters",
                message="Invalid name. Only letters are allowed. Please try again.",
                severity="error",
            ))
        
        return ValidationResult(
            field="name",
            raw_input=text,
            value=None if issues else name,
            issues=issues,
        )
    
    def validate_amount_text(self, text: str) -> ValidationResult:
        """
        Deposit amounts must be numeric, finite, in range and not negative.
        
        Amounts above a plan ceiling pass here: the plan refuses them.
        """
        issues = []
        amount = None
        
        if not is_numeric(text):
            issues.append(ValidationIssue(
                field="amount",
                issue_type="not_numeric",
                message="Invalid amount. Please enter a numeric value.",
                severity="error",
            ))
        else:
            try:
                amount = to_amount(text)
                validate_amount(amount)
            except AmountOutOfRangeError:
                amount = None
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="out_of_range",
                    message="Invalid amount. The number is too large.",
                    severity="error",
                ))
            except InvalidAmountError:
                amount = None
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="not_finite",
                    message="Invalid amount. Please enter a finite number.",
                    severity="error",
                ))
            except NegativeAmountError:
                amount = None
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="negative",
                    message="Amount cannot be negative. Please try again.",
                    severity="error",
                ))
        
        return ValidationResult(
            field="amount",
            raw_input=text,
            value=amount,
            issues=issues,
        )
    
    def validate_plan_choice(self, text: str) -> ValidationResult:
        """Accepts 1 / 2 as in the menu, or the plan names."""
        plan = PLAN_CHOICES.get(text.strip().lower())
        issues = []
        
        if plan is None:
            issues.append(ValidationIssue(
                field="plan",
                issue_type="unknown_choice",
                message="Invalid strategy choice. Please try again.",
                severity="error",
            ))
        
        return ValidationResult(
            field="plan",
            raw_input=text,
            value=plan,
            issues=issues,
        )
    
    def validate_identifier(self, text: str) -> ValidationResult:
        """
        Check the shape of a depositor ID.
        
        A malformed ID is only a warning: the lookup has the final say.
        """
        depositor_id = text.strip()
        issues = []
        
        if not self._id_pattern.match(depositor_id):
            issues.append(ValidationIssue(
                field="depositor_id",
                issue_type="invalid_format",
                message=(
                    f"'{depositor_id}' does not look like a depositor ID "
                    f"({self._id_settings.prefix} followed by 6 digits)"
                ),
                severity="warning",
            ))
        
        return ValidationResult(
            field="depositor_id",
            raw_input=text,
            value=depositor_id,
            issues=issues,
        )
    
    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """One line per issue, errors first."""
        if not result.issues:
            return ""
        
        errors = [i.message for i in result.issues if i.severity == "error"]
        others = [i.message for i in result.issues if i.severity != "error"]
        return "\n".join(errors + others)
