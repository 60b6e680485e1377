"""Pytest fixtures for testing"""

import logging
import pytest
from typing import Generator
from bank_account.domain.account import Account
from bank_account.infrastructure.observability.logging import CustomJsonFormatter


@pytest.fixture
def account() -> Account:
    """Standard account with a $100 opening balance"""
    return Account("John Doe", 100.0)


@pytest.fixture
def edge_account() -> Account:
    """Account used by the edge-case grids"""
    return Account("Edge Tester", 100.0)


@pytest.fixture(autouse=True)
def reset_json_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging() so they don't outlive the test's streams"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, CustomJsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
