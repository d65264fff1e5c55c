"""Account service - sign-in lifecycle, identity and profile."""

import logging

from trips.auth_context import AuthContext
from trips.domain import AccountRegistration, Employee, ProfileUpdate, SignIn
from trips.domain.errors import AuthorizationError, DomainRejectedError
from trips.stores.interfaces import AccountStore

logger = logging.getLogger(__name__)

EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
LOGIN_FAILED = "Login failed. Please try again."
UNVERIFIED_MESSAGE = "Please verify your email before logging in."


class AccountService:
    """Service for authentication and profile operations.

    Writes sign-in state to the injected AuthContext.
    """

    def __init__(self, accounts: AccountStore, auth: AuthContext) -> None:
        self._accounts = accounts
        self._auth = auth

    def login(self, email: str, password: str) -> SignIn:
        """Sign in and persist the token with an employee snapshot.

        Raises:
            DomainRejectedError: If the credentials are refused (a 401 from
                the API included) or the email is not verified yet
                (remote_code EMAIL_NOT_VERIFIED).
        """
        try:
            grant = self._accounts.login(email, password)
        except DomainRejectedError as exc:
            if exc.remote_code == EMAIL_NOT_VERIFIED:
                raise DomainRejectedError(
                    UNVERIFIED_MESSAGE, status_code=exc.status_code, remote_code=EMAIL_NOT_VERIFIED
                ) from exc
            raise exc.with_fallback(LOGIN_FAILED)
        except AuthorizationError as exc:
            # wrong credentials; there is no session to expire yet
            raise DomainRejectedError(exc.server_message or LOGIN_FAILED, status_code=401) from exc
        self._auth.sign_in(grant)
        return grant

    def logout(self) -> None:
        self._auth.invalidate()

    def me(self) -> Employee:
        """Fetch the current employee and refresh the cached snapshot."""
        employee = self._accounts.current_employee()
        self._auth.remember(employee)
        return employee

    def register_account(self, registration: AccountRegistration) -> None:
        try:
            self._accounts.register_account(registration)
        except DomainRejectedError as exc:
            raise exc.with_fallback("Registration failed. Please try again.")
        logger.info("Account created for %s", registration.email)

    def resend_verification(self, email: str) -> None:
        try:
            self._accounts.resend_verification(email)
        except DomainRejectedError as exc:
            raise exc.with_fallback("Failed to resend verification email.")

    def verify_email(self, token: str) -> None:
        try:
            self._accounts.verify_email(token)
        except DomainRejectedError as exc:
            raise exc.with_fallback("Email verification failed.")

    def request_password_reset(self, email: str) -> None:
        try:
            self._accounts.request_password_reset(email)
        except DomainRejectedError as exc:
            raise exc.with_fallback("Failed to send reset email.")

    def reset_password(self, token: str, password: str) -> None:
        try:
            self._accounts.reset_password(token, password)
        except DomainRejectedError as exc:
            raise exc.with_fallback("Password reset failed")

    def update_profile(self, update: ProfileUpdate) -> Employee:
        """Update the signed-in employee and return the refreshed record."""
        employee = self._accounts.current_employee()
        try:
            self._accounts.update_profile(employee.id, update)
        except DomainRejectedError as exc:
            raise exc.with_fallback("Failed to update profile")
        logger.info("Profile of employee %s updated", employee.id)
        return self.me()
