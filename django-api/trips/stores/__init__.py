from trips.stores.api_store import ApiAccountStore, ApiTripStore
from trips.stores.http_client import TahwisaApiClient
from trips.stores.interfaces import AccountStore, TripStore

__all__ = [
    "AccountStore",
    "ApiAccountStore",
    "ApiTripStore",
    "TahwisaApiClient",
    "TripStore",
]
