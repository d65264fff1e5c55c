"""Construction of the stores a request works with."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from trips.stores import AccountStore, ApiAccountStore, ApiTripStore, TahwisaApiClient, TripStore


@dataclass(frozen=True)
class Stores:
    trips: TripStore
    accounts: AccountStore


@contextmanager
def open_stores(request) -> Iterator[Stores]:
    """Yield API-backed stores authenticated with the request's bearer token."""
    with TahwisaApiClient(token=request.auth_context.token) as client:
        yield Stores(trips=ApiTripStore(client), accounts=ApiAccountStore(client))
