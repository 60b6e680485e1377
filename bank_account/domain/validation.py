"""Amount precondition checks for account operations"""

import math

from bank_account.domain.exceptions import ValidationError


def validate_credit_amount(amount: float) -> None:
    """
    Reject amounts that cannot be credited.

    Rules:
    - NaN is rejected
    - Negative amounts are rejected (including -inf)
    - +inf is rejected so the balance stays finite
    - Zero is a valid (no-op) credit
    """
    if math.isnan(amount):
        raise ValidationError("amount", amount, "amount is not a number")
    if amount < 0:
        raise ValidationError("amount", amount, "amount must not be negative")
    if math.isinf(amount):
        raise ValidationError("amount", amount, "amount must be finite")


def validate_debit_amount(amount: float, balance: float) -> None:
    """
    Reject amounts that cannot be debited from `balance`.

    There is no explicit infinity check: +inf always exceeds a finite
    balance and -inf is negative.
    """
    if math.isnan(amount):
        raise ValidationError("amount", amount, "amount is not a number")
    if amount < 0:
        raise ValidationError("amount", amount, "amount must not be negative")
    if amount > balance:
        raise ValidationError("amount", amount, f"amount exceeds balance of {balance}")
