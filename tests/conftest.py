"""
tests/conftest.py
=================
Shared pytest fixtures for the password strength service.
"""
import pytest
from fastapi.testclient import TestClient

from passgauge.app import app
from passgauge.models.policy import DEFAULT_PASSWORD_POLICY
from passgauge.services.strength_service import PasswordSignals
from passgauge.utils.dependencies import get_password_policy


@pytest.fixture
def client():
    """HTTP client pinned to the default policy, independent of the environment."""
    async def _default_policy():
        return DEFAULT_PASSWORD_POLICY

    app.dependency_overrides[get_password_policy] = _default_policy
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_signals():
    """Factory for PasswordSignals with everything off unless overridden."""
    def _make(**overrides):
        values = dict(
            length=0,
            unique_chars=0,
            has_lowercase=False,
            has_uppercase=False,
            has_digit=False,
            has_symbol=False,
            has_whitespace=False,
            weak_pattern=False,
            sequence=False,
            repeating_runs=False,
            identity_contains=False,
        )
        values.update(overrides)
        return PasswordSignals(**values)
    return _make
