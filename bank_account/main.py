"""Console entry point - runs the demo account and prints its balance"""

import logging

from bank_account.config import Settings, settings
from bank_account.domain.account import Account
from bank_account.domain.exceptions import ValidationError
from bank_account.infrastructure.observability.logging import setup_logging, log_operation
from bank_account.infrastructure.observability.metrics import record_operation, record_balance

OPERATIONS = ("credit", "debit")


def apply_operation(account: Account, operation: str, amount: float) -> None:
    """
    Run a credit or debit against the account and record the outcome.

    Rejections are logged and counted, then re-raised unchanged.
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")

    try:
        getattr(account, operation)(amount)
    except ValidationError as e:
        record_operation(operation, False, amount)
        log_operation(account.name, operation, amount, account.balance, False, reason=e.reason)
        raise

    record_operation(operation, True, amount)
    record_balance(account.name, account.balance)
    log_operation(account.name, operation, amount, account.balance, True)


def run(config: Settings) -> Account:
    """Open the demo account, credit it, then debit it"""
    account = Account(config.demo_customer_name, config.demo_opening_balance)
    record_balance(account.name, account.balance)
    logging.info("Account opened", extra={"account_name": account.name, "balance": account.balance})

    apply_operation(account, "credit", config.demo_credit_amount)
    apply_operation(account, "debit", config.demo_debit_amount)

    return account


def main() -> None:
    setup_logging(settings.log_level)

    account = run(settings)

    print(f"Current balance is {account.balance}")


if __name__ == "__main__":
    main()
