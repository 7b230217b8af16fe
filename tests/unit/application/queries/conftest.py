"""Shared fixtures for analytics query tests."""

from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def mock_transaction_port():
    """Transaction read port returning no transactions."""
    port = AsyncMock()
    port.fetch_transactions.return_value = []
    return port


@pytest.fixture
def mock_budget_port():
    """Budget read port returning no budgets."""
    port = AsyncMock()
    port.fetch_budgets.return_value = []
    return port
