"""Per-request authentication context.

Holds the bearer token and a cached employee snapshot in an injected
key-value store (the Django session in production, a dict in tests).
Both keys are always cleared together.
"""

import json
import logging
from typing import Any, MutableMapping

from trips.domain import Employee, SignIn
from trips.stores.mapping import employee_from_wire, employee_to_wire

logger = logging.getLogger(__name__)

TOKEN_KEY = "authorization"
EMPLOYEE_KEY = "employee_data"


class AuthContext:
    """Explicit sign-in state for one browser session.

    Lifecycle:
    - bootstrapped from persisted storage by AuthContextMiddleware
    - populated by sign_in() after a successful login
    - cleared by invalidate() on logout or when the API answers 401
    """

    def __init__(self, storage: MutableMapping[str, Any]) -> None:
        self._storage = storage

    @property
    def token(self) -> str | None:
        return self._storage.get(TOKEN_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        """Presence of a token is the only signal used."""
        return self.token is not None

    @property
    def employee(self) -> Employee | None:
        raw = self._storage.get(EMPLOYEE_KEY)
        if not raw:
            return None
        try:
            return employee_from_wire(json.loads(raw))
        except (KeyError, TypeError, ValueError):
            logger.warning("Discarding unreadable employee snapshot")
            self._storage.pop(EMPLOYEE_KEY, None)
            return None

    @property
    def is_admin(self) -> bool:
        """Optimistic role check against the cached snapshot, no round trip."""
        employee = self.employee
        return employee is not None and employee.is_admin

    def sign_in(self, grant: SignIn) -> None:
        self._storage[TOKEN_KEY] = grant.token
        self.remember(grant.employee)
        logger.info("Employee %s signed in", grant.employee.id)

    def remember(self, employee: Employee) -> None:
        self._storage[EMPLOYEE_KEY] = json.dumps(employee_to_wire(employee))

    def invalidate(self) -> None:
        if self.is_authenticated:
            logger.info("Invalidating auth context")
        self._storage.pop(TOKEN_KEY, None)
        self._storage.pop(EMPLOYEE_KEY, None)
