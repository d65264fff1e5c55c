"""Pytest configuration and shared fixtures."""

from contextlib import contextmanager

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from tests.factories import (
    NOW,
    make_destination,
    make_employee,
    make_period,
    make_session,
)
from tests.fakes import FakeAccountStore, FakeTripStore
from trips.domain import Role
from trips.handlers.dependencies import Stores


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin django.utils.timezone.now to NOW."""
    monkeypatch.setattr(timezone, "now", lambda: NOW)
    return NOW


@pytest.fixture
def employee():
    return make_employee()


@pytest.fixture
def trip_store() -> FakeTripStore:
    return FakeTripStore(
        destinations=[make_destination()],
        periods=[make_period()],
        sessions=[make_session()],
    )


@pytest.fixture
def account_store(employee) -> FakeAccountStore:
    return FakeAccountStore(employee)


@pytest.fixture
def fake_stores(monkeypatch, trip_store, account_store) -> Stores:
    """Route every view to the in-memory stores instead of the remote API."""
    stores = Stores(trips=trip_store, accounts=account_store)

    @contextmanager
    def open_fake_stores(request):
        yield stores

    monkeypatch.setattr("trips.handlers.views.open_stores", open_fake_stores)
    return stores


def _sign_in(client: APIClient, account_store: FakeAccountStore) -> APIClient:
    response = client.post(
        "/api/auth/login",
        {"email": account_store.employee.email, "password": account_store.password},
        format="json",
    )
    assert response.status_code == 200, response.content
    return client


@pytest.fixture
def signed_in_client(api_client, fake_stores, account_store) -> APIClient:
    return _sign_in(api_client, account_store)


@pytest.fixture
def admin_client(api_client, fake_stores, account_store) -> APIClient:
    account_store.employee = make_employee(id=1, role=Role.ADMIN)
    return _sign_in(api_client, account_store)
