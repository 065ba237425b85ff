"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def kiwibank_contiguous() -> str:
    """Kiwibank account number as one run of 16 digits."""
    return "3890000000000123"


@pytest.fixture
def asb_canonical() -> str:
    """ASB account number already in canonical form."""
    return "12-3456-7890123-001"


@pytest.fixture
def sample_account_id() -> str:
    """Sample account identifier."""
    return "acc_ckx7qv0s8000001"


@pytest.fixture
def sample_authorisation_id() -> str:
    """Sample authorisation identifier."""
    return "auth_ckx7qv0s8000002"
