"""Unit tests for amount validation rules and the error they raise"""

import math
import pytest
from bank_account.domain.exceptions import DomainException, ValidationError
from bank_account.domain.validation import validate_credit_amount, validate_debit_amount


def test_validation_error_carries_parameter_name():
    with pytest.raises(ValidationError) as exc_info:
        validate_credit_amount(-1.0)

    err = exc_info.value
    assert err.param_name == "amount"
    assert err.value == -1.0
    assert "negative" in err.reason
    assert str(err).startswith("amount out of range")


def test_validation_error_hierarchy():
    """Callers may catch it as a domain error or as a plain ValueError"""
    err = ValidationError("amount", 1.0)

    assert isinstance(err, DomainException)
    assert isinstance(err, ValueError)
    assert err.reason == "out of range"


@pytest.mark.parametrize(
    "amount,reason",
    [
        (math.nan, "not a number"),
        (-0.5, "negative"),
        (-math.inf, "negative"),
        (math.inf, "finite"),
    ],
)
def test_credit_rejection_reasons(amount, reason):
    with pytest.raises(ValidationError, match=reason):
        validate_credit_amount(amount)


@pytest.mark.parametrize("amount", [0.0, 5e-324, 1.0, 1.7976931348623157e308])
def test_credit_accepts_finite_non_negative(amount):
    validate_credit_amount(amount)


@pytest.mark.parametrize(
    "amount,reason",
    [
        (math.nan, "not a number"),
        (-0.5, "negative"),
        (-math.inf, "negative"),
        (math.inf, "exceeds balance"),
        (100.01, "exceeds balance"),
    ],
)
def test_debit_rejection_reasons(amount, reason):
    """Infinity has no dedicated check; it is caught by the balance comparison"""
    with pytest.raises(ValidationError, match=reason):
        validate_debit_amount(amount, 100.0)


def test_debit_allows_exact_balance():
    validate_debit_amount(100.0, 100.0)
