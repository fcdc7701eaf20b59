"""Root-level pytest configuration and shared fixtures.

Adds the src/ directory to sys.path so myclinic can be imported without installation.
Provides payload factories for the request schemas used across the test suites.

Key exports:
    - Payload factories (make_payment_payload, make_time_off_payload, ...)
    - Pytest fixtures returning a fresh valid payload per test
"""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ---------------------------------------------------------------------------
# Payload factories
# ---------------------------------------------------------------------------


def make_payment_payload(**overrides: Any) -> Dict[str, Any]:
    """Build a valid AddPayment payload.

    Args:
        **overrides: Wire-name keys replacing the defaults.

    Returns:
        Dict ready to pass to validate().
    """
    payload: Dict[str, Any] = {"amount": 25000, "method": "CASH"}
    payload.update(overrides)
    return payload


def make_time_off_payload(**overrides: Any) -> Dict[str, Any]:
    """Build a valid CreateTimeOff payload.

    Args:
        **overrides: Wire-name keys replacing the defaults.

    Returns:
        Dict ready to pass to validate().
    """
    payload: Dict[str, Any] = {
        "type": "VACATION",
        "startDate": "2026-03-01",
        "endDate": "2026-03-05",
    }
    payload.update(overrides)
    return payload


def make_login_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"email": "admin@myclinic.com", "password": "Admin123!"}
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def payment_payload() -> Dict[str, Any]:
    return make_payment_payload()


@pytest.fixture
def time_off_payload() -> Dict[str, Any]:
    return make_time_off_payload()


@pytest.fixture
def login_payload() -> Dict[str, Any]:
    return make_login_payload()
