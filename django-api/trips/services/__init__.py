from trips.services.account_service import AccountService
from trips.services.catalog_service import CatalogService
from trips.services.history_service import HistoryService
from trips.services.registration_service import RegistrationService
from trips.services.selection_service import SelectionService

__all__ = [
    "AccountService",
    "CatalogService",
    "HistoryService",
    "RegistrationService",
    "SelectionService",
]
