"""Account entity - name plus a float balance mutated only by credit/debit"""

from bank_account.domain.validation import validate_credit_amount, validate_debit_amount


class Account:
    """
    Single customer account.

    The constructor stores the opening balance verbatim, so an account may
    start negative, NaN or infinite. Only credit() and debit() validate.
    Not safe for concurrent mutation; callers sharing an instance across
    threads must lock around it.
    """

    def __init__(self, name: str, balance: float):
        self._name = name
        self._balance = balance

    @property
    def name(self) -> str:
        return self._name

    @property
    def balance(self) -> float:
        return self._balance

    def get_name(self) -> str:
        return self._name

    def get_balance(self) -> float:
        return self._balance

    def credit(self, amount: float) -> None:
        """Add a non-negative finite amount to the balance"""
        validate_credit_amount(amount)
        self._balance += amount

    def debit(self, amount: float) -> None:
        """Subtract a non-negative amount not exceeding the current balance"""
        validate_debit_amount(amount, self._balance)
        self._balance -= amount

    def __repr__(self) -> str:
        return f"Account(name={self._name!r}, balance={self._balance!r})"
