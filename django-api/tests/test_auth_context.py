"""Unit tests for AuthContext.

Run with: pytest tests/test_auth_context.py -v
"""

import json

import pytest

from tests.factories import make_employee
from trips.auth_context import EMPLOYEE_KEY, TOKEN_KEY, AuthContext
from trips.domain import Role, SignIn


@pytest.fixture
def storage() -> dict:
    return {}


class TestAuthContext:
    """Tests for sign-in state kept in session storage."""

    def test_starts_signed_out(self, storage):
        auth = AuthContext(storage)
        assert auth.token is None
        assert not auth.is_authenticated
        assert auth.employee is None
        assert not auth.is_admin

    def test_sign_in_stores_token_and_snapshot(self, storage):
        employee = make_employee()
        AuthContext(storage).sign_in(SignIn(token="jwt-1", employee=employee))

        assert storage[TOKEN_KEY] == "jwt-1"
        assert json.loads(storage[EMPLOYEE_KEY])["email"] == employee.email

    def test_bootstraps_from_existing_storage(self, storage):
        """A new context over the same storage sees the earlier sign-in."""
        employee = make_employee(role=Role.ADMIN)
        AuthContext(storage).sign_in(SignIn(token="jwt-1", employee=employee))

        auth = AuthContext(storage)
        assert auth.is_authenticated
        assert auth.employee == employee
        assert auth.is_admin

    def test_token_alone_means_authenticated(self, storage):
        storage[TOKEN_KEY] = "jwt-1"
        auth = AuthContext(storage)
        assert auth.is_authenticated
        assert not auth.is_admin

    def test_empty_token_is_not_authenticated(self, storage):
        storage[TOKEN_KEY] = ""
        assert not AuthContext(storage).is_authenticated

    def test_invalidate_clears_both_keys(self, storage):
        auth = AuthContext(storage)
        auth.sign_in(SignIn(token="jwt-1", employee=make_employee()))
        auth.invalidate()
        assert TOKEN_KEY not in storage
        assert EMPLOYEE_KEY not in storage

    def test_invalidate_when_signed_out(self, storage):
        AuthContext(storage).invalidate()
        assert storage == {}

    def test_unreadable_snapshot_is_discarded(self, storage):
        storage[TOKEN_KEY] = "jwt-1"
        storage[EMPLOYEE_KEY] = "{not json"
        auth = AuthContext(storage)
        assert auth.employee is None
        assert EMPLOYEE_KEY not in storage
        assert auth.is_authenticated

    def test_remember_replaces_snapshot(self, storage):
        auth = AuthContext(storage)
        auth.sign_in(SignIn(token="jwt-1", employee=make_employee()))
        auth.remember(make_employee(role=Role.ADMIN))
        assert auth.is_admin
