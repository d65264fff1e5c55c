"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors reach the exception handler (handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from trips.domain import DestinationId, InscriptionId, PeriodId, SessionId
from trips.domain.errors import InvalidIdError
from trips.handlers import serializers as s
from trips.handlers.dependencies import open_stores
from trips.handlers.permissions import IsAdministrator
from trips.services import (
    AccountService,
    CatalogService,
    HistoryService,
    RegistrationService,
    SelectionService,
)


def parse_id(id_type, raw: str):
    try:
        return id_type.from_string(raw)
    except ValueError as exc:
        raise InvalidIdError() from exc


def validated(serializer_class, data):
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer


# -- account --------------------------------------------------------------


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        form = validated(s.LoginSerializer, request.data)
        with open_stores(request) as stores:
            grant = AccountService(stores.accounts, request.auth_context).login(
                form.validated_data["email"], form.validated_data["password"]
            )
        return Response({"employee": s.EmployeeSerializer(grant.employee).data})


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        request.auth_context.invalidate()
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    def get(self, request: Request) -> Response:
        with open_stores(request) as stores:
            employee = AccountService(stores.accounts, request.auth_context).me()
        return Response(s.EmployeeSerializer(employee).data)


class AccountRegistrationView(APIView):
    """Handler for POST /api/auth/register"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        form = validated(s.AccountRegistrationSerializer, request.data)
        with open_stores(request) as stores:
            AccountService(stores.accounts, request.auth_context).register_account(form.build())
        return Response(
            {"message": "Registration successful. Please check your email to verify your account."},
            status=status.HTTP_201_CREATED,
        )


class ResendVerificationView(APIView):
    """Handler for POST /api/auth/resend-verification"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        form = validated(s.EmailSerializer, request.data)
        with open_stores(request) as stores:
            AccountService(stores.accounts, request.auth_context).resend_verification(
                form.validated_data["email"]
            )
        return Response({"message": "Verification email sent."})


class VerifyEmailView(APIView):
    """Handler for POST /api/auth/verify-email"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        form = validated(s.TokenSerializer, request.data)
        with open_stores(request) as stores:
            AccountService(stores.accounts, request.auth_context).verify_email(form.validated_data["token"])
        return Response({"message": "Email verified successfully! You can now log in."})


class PasswordResetRequestView(APIView):
    """Handler for POST /api/auth/request-password-reset"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        form = validated(s.EmailSerializer, request.data)
        with open_stores(request) as stores:
            AccountService(stores.accounts, request.auth_context).request_password_reset(
                form.validated_data["email"]
            )
        return Response({"message": "If the address is known, a reset link has been sent."})


class PasswordResetView(APIView):
    """Handler for POST /api/auth/reset-password"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        form = validated(s.PasswordResetSerializer, request.data)
        with open_stores(request) as stores:
            AccountService(stores.accounts, request.auth_context).reset_password(
                form.validated_data["token"], form.validated_data["password"]
            )
        return Response({"message": "Password reset successfully."})


class ProfileView(APIView):
    """Handler for PUT /api/profile"""

    def put(self, request: Request) -> Response:
        form = validated(s.ProfileUpdateSerializer, request.data)
        with open_stores(request) as stores:
            employee = AccountService(stores.accounts, request.auth_context).update_profile(form.build())
        return Response(s.EmployeeSerializer(employee).data)


# -- catalog --------------------------------------------------------------


class DestinationListView(APIView):
    """Handler for GET /api/destinations"""

    def get(self, request: Request) -> Response:
        with open_stores(request) as stores:
            destinations = CatalogService(stores.trips).destinations()
        return Response(s.DestinationSerializer(destinations, many=True).data)


class PeriodListView(APIView):
    """Handler for GET /api/periods?search=&status="""

    def get(self, request: Request) -> Response:
        query = validated(s.PeriodQuerySerializer, request.query_params)
        with open_stores(request) as stores:
            page = CatalogService(stores.trips).periods(
                timezone.now(), query.validated_data["search"], query.validated_data["status"]
            )
        return Response(s.PeriodPageSerializer(page).data)


class SessionListView(APIView):
    """Handler for GET /api/sessions"""

    def get(self, request: Request) -> Response:
        with open_stores(request) as stores:
            sessions = CatalogService(stores.trips).sessions(timezone.now())
        return Response(s.SessionViewSerializer(sessions, many=True).data)


# -- registrations --------------------------------------------------------


class RegistrationView(APIView):
    """Handler for GET and POST /api/registrations"""

    def get(self, request: Request) -> Response:
        with open_stores(request) as stores:
            overview = RegistrationService(stores.trips, stores.accounts).overview(timezone.now())
        return Response(s.RegistrationOverviewSerializer(overview).data)

    def post(self, request: Request) -> Response:
        form = validated(s.RegistrationRequestSerializer, request.data)
        session_id = SessionId(form.validated_data["session_id"])
        with open_stores(request) as stores:
            inscriptions = RegistrationService(stores.trips, stores.accounts).register(
                timezone.now(), session_id
            )
        return Response(
            {
                "message": "Registration submitted successfully! You are now registered for this session.",
                "inscriptions": s.InscriptionSerializer(inscriptions, many=True).data,
            },
            status=status.HTTP_201_CREATED,
        )


class RegistrationDetailView(APIView):
    """Handler for DELETE /api/registrations/{inscription_id}"""

    def delete(self, request: Request, inscription_id: str) -> Response:
        inscription = parse_id(InscriptionId, inscription_id)
        with open_stores(request) as stores:
            inscriptions = RegistrationService(stores.trips, stores.accounts).cancel(inscription)
        return Response(
            {
                "message": "Registration cancelled successfully.",
                "inscriptions": s.InscriptionSerializer(inscriptions, many=True).data,
            }
        )


# -- selections -----------------------------------------------------------


class SelectionResultView(APIView):
    """Handler for GET /api/selections/{session_id}"""

    def get(self, request: Request, session_id: str) -> Response:
        session = parse_id(SessionId, session_id)
        with open_stores(request) as stores:
            partition = SelectionService(stores.trips).results(session)
        return Response(s.SelectionPartitionSerializer(partition).data)


class GenerateSelectionView(APIView):
    """Handler for POST /api/selections/{session_id}/generate"""

    permission_classes = [IsAdministrator]

    def post(self, request: Request, session_id: str) -> Response:
        session = parse_id(SessionId, session_id)
        with open_stores(request) as stores:
            report = SelectionService(stores.trips).generate(session)
        return Response(s.DrawReportSerializer(report).data, status=report.status_code)


# -- administration -------------------------------------------------------


class HistoryView(APIView):
    """Handler for GET /api/history?search=&year=&status="""

    permission_classes = [IsAdministrator]

    def get(self, request: Request) -> Response:
        query = validated(s.HistoryQuerySerializer, request.query_params)
        with open_stores(request) as stores:
            page = HistoryService(stores.trips).history(query.build())
        return Response(s.HistoryPageSerializer(page).data)


class AdminDashboardView(APIView):
    """Handler for GET /api/admin/dashboard"""

    permission_classes = [IsAdministrator]

    def get(self, request: Request) -> Response:
        with open_stores(request) as stores:
            stats = CatalogService(stores.trips, stores.accounts).dashboard(timezone.now())
        return Response(s.DashboardSerializer(stats).data)


class AdminDestinationListView(APIView):
    """Handler for POST /api/admin/destinations"""

    permission_classes = [IsAdministrator]

    def post(self, request: Request) -> Response:
        form = validated(s.DestinationInputSerializer, request.data)
        with open_stores(request) as stores:
            destination = CatalogService(stores.trips).create_destination(form.build())
        return Response(s.DestinationSerializer(destination).data, status=status.HTTP_201_CREATED)


class AdminDestinationDetailView(APIView):
    """Handler for PUT and DELETE /api/admin/destinations/{destination_id}"""

    permission_classes = [IsAdministrator]

    def put(self, request: Request, destination_id: str) -> Response:
        destination = parse_id(DestinationId, destination_id)
        form = validated(s.DestinationInputSerializer, request.data)
        with open_stores(request) as stores:
            updated = CatalogService(stores.trips).update_destination(destination, form.build())
        return Response(s.DestinationSerializer(updated).data)

    def delete(self, request: Request, destination_id: str) -> Response:
        destination = parse_id(DestinationId, destination_id)
        with open_stores(request) as stores:
            CatalogService(stores.trips).delete_destination(destination)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminPeriodListView(APIView):
    """Handler for POST /api/admin/periods"""

    permission_classes = [IsAdministrator]

    def post(self, request: Request) -> Response:
        form = validated(s.PeriodInputSerializer, request.data)
        with open_stores(request) as stores:
            view = CatalogService(stores.trips).create_period(timezone.now(), form.build())
        return Response(s.PeriodViewSerializer(view).data, status=status.HTTP_201_CREATED)


class AdminPeriodDetailView(APIView):
    """Handler for PUT and DELETE /api/admin/periods/{period_id}"""

    permission_classes = [IsAdministrator]

    def put(self, request: Request, period_id: str) -> Response:
        period = parse_id(PeriodId, period_id)
        form = validated(s.PeriodInputSerializer, request.data)
        with open_stores(request) as stores:
            view = CatalogService(stores.trips).update_period(timezone.now(), period, form.build())
        return Response(s.PeriodViewSerializer(view).data)

    def delete(self, request: Request, period_id: str) -> Response:
        period = parse_id(PeriodId, period_id)
        with open_stores(request) as stores:
            CatalogService(stores.trips).delete_period(period)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminSessionListView(APIView):
    """Handler for POST /api/admin/sessions"""

    permission_classes = [IsAdministrator]

    def post(self, request: Request) -> Response:
        form = validated(s.SessionInputSerializer, request.data)
        with open_stores(request) as stores:
            view = CatalogService(stores.trips).create_session(timezone.now(), form.build())
        return Response(s.SessionViewSerializer(view).data, status=status.HTTP_201_CREATED)


class AdminSessionDetailView(APIView):
    """Handler for PUT and DELETE /api/admin/sessions/{session_id}"""

    permission_classes = [IsAdministrator]

    def put(self, request: Request, session_id: str) -> Response:
        session = parse_id(SessionId, session_id)
        form = validated(s.SessionInputSerializer, request.data)
        with open_stores(request) as stores:
            view = CatalogService(stores.trips).update_session(timezone.now(), session, form.build())
        return Response(s.SessionViewSerializer(view).data)

    def delete(self, request: Request, session_id: str) -> Response:
        session = parse_id(SessionId, session_id)
        with open_stores(request) as stores:
            CatalogService(stores.trips).delete_session(session)
        return Response(status=status.HTTP_204_NO_CONTENT)

