"""Pytest configuration and shared fixtures for tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.tax.calculator import BusinessType, TaxInput


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests.

    Returns:
        Backend name string.
    """
    return "asyncio"


@pytest.fixture
def california_input() -> TaxInput:
    """Reference scenario: $100k income, $10k deductions, California."""
    return TaxInput(
        annual_income=Decimal("100000"),
        state="CA",
        business_type=BusinessType.SOLE_PROPRIETOR,
        deductions=Decimal("10000"),
    )


@pytest.fixture
def client() -> TestClient:
    """Create a test client for API testing.

    Returns:
        FastAPI TestClient instance.
    """
    return TestClient(app)
