"""Prometheus metrics for credit/debit outcomes and balances"""

from prometheus_client import Counter, Histogram, Gauge

# Operation metrics
operation_counter = Counter(
    "bank_account_operations_total",
    "Credit and debit attempts",
    ["operation", "outcome"],  # credit | debit, applied | rejected
)

operation_amount_histogram = Histogram(
    "bank_account_operation_amount",
    "Amounts of applied operations",
    ["operation"],
    buckets=[1.0, 10.0, 100.0, 1_000.0, 10_000.0, 100_000.0],
)

# Account state
balance_gauge = Gauge(
    "bank_account_balance",
    "Current account balance",
    ["account"],
)


def record_operation(operation: str, succeeded: bool, amount: float) -> None:
    """Count an operation attempt; applied amounts also feed the histogram"""
    outcome = "applied" if succeeded else "rejected"
    operation_counter.labels(operation=operation, outcome=outcome).inc()

    if succeeded:
        operation_amount_histogram.labels(operation=operation).observe(amount)


def record_balance(account_name: str, balance: float) -> None:
    """Publish the latest balance of an account"""
    balance_gauge.labels(account=account_name).set(balance)
