"""Unit tests for the trip services.

These test orchestration and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import pytest

from tests.factories import (
    NOW,
    at,
    make_destination,
    make_employee,
    make_history_row,
    make_inscription,
    make_period,
    make_selection,
    make_session,
)
from tests.fakes import FakeAccountStore
from trips.auth_context import AuthContext
from trips.domain import (
    Capacity,
    DestinationDraft,
    DestinationKind,
    DrawOutcome,
    InscriptionId,
    InscriptionStatus,
    PeriodState,
    PeriodStatus,
    ProfileUpdate,
    RefusalReason,
    SelectionType,
    SessionId,
    SessionStatus,
)
from trips.domain.errors import (
    AuthorizationError,
    DomainRejectedError,
    NotFoundError,
    RegistrationRefusedError,
    TransportError,
)
from trips.domain.history import HistoryFilter
from trips.services import (
    AccountService,
    CatalogService,
    HistoryService,
    RegistrationService,
    SelectionService,
)


class TestRegistrationService:
    """Tests for RegistrationService."""

    def test_overview_offers_only_sessions_not_started(self, trip_store, account_store):
        """Sessions already under way are not offered."""
        trip_store.sessions.append(make_session(id=2, start="2025-01-01", end="2025-01-08"))
        overview = RegistrationService(trip_store, account_store).overview(NOW)

        assert [offer.session.id for offer in overview.offers] == [SessionId(1)]
        offer = overview.offers[0]
        assert offer.period_status is PeriodStatus.UPCOMING
        assert offer.eligibility.allowed

    def test_overview_fetches_inscriptions_after_the_catalog(self, trip_store, account_store, employee):
        """The employee's inscriptions are requested once the employee is known."""
        RegistrationService(trip_store, account_store).overview(NOW)

        names = [call[0] for call in trip_store.calls]
        assert names.index("list_inscriptions_for_employee") > names.index("list_sessions")
        assert names.index("list_inscriptions_for_employee") > names.index("list_periods")
        assert trip_store.called("list_inscriptions_for_employee") == [
            ("list_inscriptions_for_employee", employee.id)
        ]
        assert account_store.called("current_employee")

    def test_overview_skips_session_with_unknown_period(self, trip_store, account_store):
        trip_store.sessions.append(make_session(id=2, period_id=99))
        overview = RegistrationService(trip_store, account_store).overview(NOW)
        assert [offer.session.id for offer in overview.offers] == [SessionId(1)]

    def test_overview_marks_existing_registration(self, trip_store, account_store):
        trip_store.inscriptions.append(make_inscription(session_id=1))
        overview = RegistrationService(trip_store, account_store).overview(NOW)
        assert overview.offers[0].eligibility.reason is RefusalReason.ALREADY_REGISTERED
        assert len(overview.inscriptions) == 1

    def test_register_returns_refreshed_inscriptions(self, trip_store, account_store, employee):
        inscriptions = RegistrationService(trip_store, account_store).register(NOW, SessionId(1))
        assert [(i.employee_id, i.session_id) for i in inscriptions] == [(employee.id, SessionId(1))]

    def test_register_unknown_session_raises_not_found(self, trip_store, account_store):
        with pytest.raises(NotFoundError):
            RegistrationService(trip_store, account_store).register(NOW, SessionId(42))

    def test_register_after_deadline_is_refused_locally(self, trip_store, account_store):
        """The API is never called when eligibility rules refuse."""
        with pytest.raises(RegistrationRefusedError) as exc_info:
            RegistrationService(trip_store, account_store).register(at("2025-01-12"), SessionId(1))
        assert exc_info.value.reason is RefusalReason.DEADLINE_PASSED
        assert not trip_store.called("register")

    def test_register_rejection_without_message_gets_fallback(self, trip_store, account_store):
        trip_store.failures["register"] = DomainRejectedError(None, status_code=409)
        with pytest.raises(DomainRejectedError) as exc_info:
            RegistrationService(trip_store, account_store).register(NOW, SessionId(1))
        assert exc_info.value.message == "You are already registered for this session."

    def test_register_rejection_keeps_server_message(self, trip_store, account_store):
        trip_store.failures["register"] = DomainRejectedError("Session complète", status_code=400)
        with pytest.raises(DomainRejectedError) as exc_info:
            RegistrationService(trip_store, account_store).register(NOW, SessionId(1))
        assert exc_info.value.message == "Session complète"

    def test_register_unexpected_status_gets_generic_fallback(self, trip_store, account_store):
        trip_store.failures["register"] = DomainRejectedError(None, status_code=422)
        with pytest.raises(DomainRejectedError) as exc_info:
            RegistrationService(trip_store, account_store).register(NOW, SessionId(1))
        assert exc_info.value.message == "Registration failed. Please try again."

    def test_cancel_removes_inscription(self, trip_store, account_store):
        trip_store.inscriptions.append(make_inscription(id=3))
        remaining = RegistrationService(trip_store, account_store).cancel(InscriptionId(3))
        assert remaining == []

    def test_cancel_unknown_inscription(self, trip_store, account_store):
        with pytest.raises(NotFoundError):
            RegistrationService(trip_store, account_store).cancel(InscriptionId(3))


class TestSelectionService:
    """Tests for SelectionService."""

    def test_results_before_draw_are_empty(self, trip_store):
        assert SelectionService(trip_store).results(SessionId(1)).is_empty

    def test_results_are_partitioned(self, trip_store):
        trip_store.selections = [
            make_selection(1, SelectionType.SUBSTITUTE, 1),
            make_selection(2, SelectionType.OFFICIAL, 2),
            make_selection(3, SelectionType.OFFICIAL, 1),
        ]
        partition = SelectionService(trip_store).results(SessionId(1))
        assert [r.record.id.value for r in partition.official] == [3, 2]
        assert partition.substitute_count == 1

    def test_generate_success_refetches_results(self, trip_store):
        trip_store.draw_results = [
            make_selection(1, SelectionType.OFFICIAL, 1),
            make_selection(2, SelectionType.SUBSTITUTE, 1),
        ]
        report = SelectionService(trip_store).generate(SessionId(1))

        assert report.outcome is DrawOutcome.GENERATED
        assert report.status_code == 201
        assert report.partition.total_count == 2
        names = [call[0] for call in trip_store.calls]
        assert names == ["generate_selection", "list_selection_results"]

    def test_second_draw_is_rejected_verbatim(self, trip_store):
        """A repeated trigger surfaces the API's refusal without retrying."""
        trip_store.selections = [make_selection(1, SelectionType.OFFICIAL, 1)]
        report = SelectionService(trip_store).generate(SessionId(1))

        assert report.outcome is DrawOutcome.REJECTED
        assert report.message == "Selection already generated for this session"
        assert report.status_code == 409
        assert report.partition is None
        assert len(trip_store.called("generate_selection")) == 1

    def test_draw_on_unknown_session(self, trip_store):
        trip_store.failures["generate_selection"] = NotFoundError("/selection/generate/9")
        report = SelectionService(trip_store).generate(SessionId(9))
        assert report.outcome is DrawOutcome.REJECTED
        assert report.status_code == 404

    def test_unprocessable_draw_keeps_api_status(self, trip_store):
        trip_store.failures["generate_selection"] = DomainRejectedError("Aucune inscription", status_code=422)
        report = SelectionService(trip_store).generate(SessionId(1))
        assert report.outcome is DrawOutcome.REJECTED
        assert report.status_code == 422
        assert report.message == "Aucune inscription"

    def test_transport_failure_reported_as_failed(self, trip_store):
        trip_store.failures["generate_selection"] = TransportError("timeout")
        report = SelectionService(trip_store).generate(SessionId(1))
        assert report.outcome is DrawOutcome.FAILED
        assert report.status_code == 502
        assert not trip_store.called("list_selection_results")


class TestHistoryService:
    def test_facets_computed_on_unfiltered_rows(self, trip_store):
        trip_store.history = [
            make_history_row(1, registration_date="2024-03-01"),
            make_history_row(2, registration_date="2023-03-01", status=InscriptionStatus.COMPLETED),
        ]
        page = HistoryService(trip_store).history(HistoryFilter(year="2024"))

        assert page.filtered_count == 1
        assert page.total_count == 2
        assert page.years == ("2024", "2023")
        assert page.statuses == ("active", "completed")


class TestCatalogService:
    """Tests for CatalogService."""

    def test_periods_carry_status_and_gate(self, trip_store):
        (view,) = CatalogService(trip_store).periods(NOW).periods
        assert view.status is PeriodStatus.UPCOMING
        assert view.registration_open
        assert view.days_until_deadline == 5
        assert view.duration_days == 5

    def test_periods_filtered_by_name_and_status(self, trip_store):
        """Counts cover every period; only matching periods are listed."""
        trip_store.periods = [
            make_period(id=1, name="Winter 2025"),
            make_period(id=2, name="Winter 2024", state=PeriodState.CLOSED),
            make_period(id=3, name="Summer 2025", deadline="2025-06-01", start="2025-07-01", end="2025-07-10"),
        ]
        service = CatalogService(trip_store)

        page = service.periods(NOW, search="WINTER")
        assert [view.period.id.value for view in page.periods] == [1, 2]
        assert page.total_count == 3
        assert page.open_count == 2

        page = service.periods(NOW, search="winter", status="closed")
        assert [view.period.id.value for view in page.periods] == [2]
        assert page.filtered_count == 1

        assert service.periods(NOW).filtered_count == 3

    def test_sessions_are_joined(self, trip_store):
        (view,) = CatalogService(trip_store).sessions(NOW)
        assert view.status is SessionStatus.UPCOMING
        assert view.destination == make_destination()
        assert view.period == make_period()
        assert view.duration_days == 4

    def test_dashboard_counts(self, trip_store, account_store):
        trip_store.sessions.append(make_session(id=2, start="2025-01-01", end="2025-01-03"))
        trip_store.inscriptions = [
            make_inscription(id=1),
            make_inscription(id=2, session_id=2, status=InscriptionStatus.COMPLETED),
        ]
        stats = CatalogService(trip_store, account_store).dashboard(NOW)

        assert stats.total_sessions == 2
        assert stats.sessions_by_status[SessionStatus.UPCOMING] == 1
        assert stats.sessions_by_status[SessionStatus.COMPLETED] == 1
        assert stats.active_registrations == 1
        assert stats.completed_trips == 1

    def test_dashboard_requires_account_store(self, trip_store):
        with pytest.raises(ValueError):
            CatalogService(trip_store).dashboard(NOW)

    def test_create_destination(self, trip_store):
        draft = DestinationDraft(
            name="Djanet",
            location="Tassili",
            capacity=Capacity(15),
            kind=DestinationKind.INTERNAL,
        )
        destination = CatalogService(trip_store).create_destination(draft)
        assert destination.name == "Djanet"
        assert len(trip_store.destinations) == 2

    def test_admin_rejection_propagates(self, trip_store):
        trip_store.failures["delete_period"] = DomainRejectedError("Période utilisée", status_code=400)
        with pytest.raises(DomainRejectedError, match="Période utilisée"):
            CatalogService(trip_store).delete_period(make_period().id)


class TestAccountService:
    """Tests for AccountService."""

    @pytest.fixture
    def auth(self) -> AuthContext:
        return AuthContext({})

    def test_login_populates_auth_context(self, account_store, auth, employee):
        AccountService(account_store, auth).login(employee.email, "secret123")
        assert auth.token == "token-abc"
        assert auth.employee == employee

    def test_login_wrong_password(self, account_store, auth, employee):
        with pytest.raises(DomainRejectedError, match="Invalid email or password"):
            AccountService(account_store, auth).login(employee.email, "wrong-pass")
        assert not auth.is_authenticated

    def test_login_unverified_email(self, account_store, auth, employee):
        account_store.failures["login"] = DomainRejectedError(
            "Email non vérifié", status_code=403, remote_code="EMAIL_NOT_VERIFIED"
        )
        with pytest.raises(DomainRejectedError) as exc_info:
            AccountService(account_store, auth).login(employee.email, "secret123")
        assert exc_info.value.message == "Please verify your email before logging in."
        assert exc_info.value.remote_code == "EMAIL_NOT_VERIFIED"

    def test_login_answered_with_401_is_a_refusal(self, account_store, auth, employee):
        """A 401 on login means bad credentials and keeps the server wording."""
        account_store.failures["login"] = AuthorizationError(server_message="Email ou mot de passe incorrect")
        with pytest.raises(DomainRejectedError) as exc_info:
            AccountService(account_store, auth).login(employee.email, "wrong-pass")
        assert exc_info.value.message == "Email ou mot de passe incorrect"
        assert exc_info.value.status_code == 401
        assert not auth.is_authenticated

    def test_login_401_without_message(self, account_store, auth, employee):
        account_store.failures["login"] = AuthorizationError()
        with pytest.raises(DomainRejectedError, match="Login failed"):
            AccountService(account_store, auth).login(employee.email, "wrong-pass")

    def test_login_rejection_without_message(self, account_store, auth, employee):
        account_store.failures["login"] = DomainRejectedError(None, status_code=400)
        with pytest.raises(DomainRejectedError, match="Login failed"):
            AccountService(account_store, auth).login(employee.email, "secret123")

    def test_logout_clears_both_keys(self, account_store, auth, employee):
        service = AccountService(account_store, auth)
        service.login(employee.email, "secret123")
        service.logout()
        assert auth.token is None
        assert auth.employee is None

    def test_me_refreshes_snapshot(self, account_store, auth):
        account_store.employee = make_employee(id=9)
        employee = AccountService(account_store, auth).me()
        assert auth.employee == employee

    def test_update_profile_targets_current_employee(self, account_store, auth, employee):
        update = ProfileUpdate(
            last_name="Benali",
            first_name="Amina",
            email=employee.email,
            phone="0550000000",
            structure="Finance",
        )
        AccountService(account_store, auth).update_profile(update)
        assert account_store.called("update_profile") == [("update_profile", employee.id, update)]

    def test_reset_password_rejection_fallback(self, account_store, auth):
        account_store.failures["reset_password"] = DomainRejectedError(None, status_code=400)
        with pytest.raises(DomainRejectedError, match="Password reset failed"):
            AccountService(account_store, auth).reset_password("tok", "newsecret")

    def test_transport_errors_propagate(self, auth):
        accounts = FakeAccountStore(make_employee())
        accounts.failures["current_employee"] = TransportError("boom")
        with pytest.raises(TransportError):
            AccountService(accounts, auth).me()
