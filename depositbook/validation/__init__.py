"""Validation package."""

from depositbook.validation.validator import (
    DepositInputValidator,
    format_amount,
    is_numeric,
    is_valid_name,
    to_amount,
    validate_amount,
)

__all__ = [
    "DepositInputValidator",
    "format_amount",
    "is_numeric",
    "is_valid_name",
    "to_amount",
    "validate_amount",
]
