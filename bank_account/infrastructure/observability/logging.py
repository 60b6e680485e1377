"""Structured JSON logging for account operations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO
from pythonjsonlogger import jsonlogger

from bank_account.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure structured JSON logging (stderr by default, stdout is program output)"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_operation(
    account_name: str,
    operation: str,
    amount: float,
    balance: float,
    succeeded: bool,
    reason: Optional[str] = None,
) -> None:
    """Log one credit/debit attempt with its outcome"""
    extra = {
        "account_name": account_name,
        "operation": operation,
        "amount": amount,
        "balance": balance,
        "outcome": "applied" if succeeded else "rejected",
    }
    if succeeded:
        logging.info(f"{operation.capitalize()} applied", extra=extra)
    else:
        extra["reason"] = reason
        logging.warning(f"{operation.capitalize()} rejected", extra=extra)
