from django.urls import path

from trips.handlers import (
    AccountRegistrationView,
    AdminDashboardView,
    AdminDestinationDetailView,
    AdminDestinationListView,
    AdminPeriodDetailView,
    AdminPeriodListView,
    AdminSessionDetailView,
    AdminSessionListView,
    DestinationListView,
    GenerateSelectionView,
    HistoryView,
    LoginView,
    LogoutView,
    MeView,
    PasswordResetRequestView,
    PasswordResetView,
    PeriodListView,
    ProfileView,
    RegistrationDetailView,
    RegistrationView,
    ResendVerificationView,
    SelectionResultView,
    SessionListView,
    VerifyEmailView,
)

urlpatterns = [
    path("auth/login", LoginView.as_view(), name="login"),
    path("auth/logout", LogoutView.as_view(), name="logout"),
    path("auth/me", MeView.as_view(), name="me"),
    path("auth/register", AccountRegistrationView.as_view(), name="account-register"),
    path("auth/resend-verification", ResendVerificationView.as_view(), name="resend-verification"),
    path("auth/verify-email", VerifyEmailView.as_view(), name="verify-email"),
    path("auth/request-password-reset", PasswordResetRequestView.as_view(), name="request-password-reset"),
    path("auth/reset-password", PasswordResetView.as_view(), name="reset-password"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("destinations", DestinationListView.as_view(), name="destination-list"),
    path("periods", PeriodListView.as_view(), name="period-list"),
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("registrations", RegistrationView.as_view(), name="registration-list"),
    path(
        "registrations/<str:inscription_id>",
        RegistrationDetailView.as_view(),
        name="registration-detail",
    ),
    path("selections/<str:session_id>", SelectionResultView.as_view(), name="selection-results"),
    path(
        "selections/<str:session_id>/generate",
        GenerateSelectionView.as_view(),
        name="selection-generate",
    ),
    path("history", HistoryView.as_view(), name="history"),
    path("admin/dashboard", AdminDashboardView.as_view(), name="admin-dashboard"),
    path("admin/destinations", AdminDestinationListView.as_view(), name="admin-destination-list"),
    path(
        "admin/destinations/<str:destination_id>",
        AdminDestinationDetailView.as_view(),
        name="admin-destination-detail",
    ),
    path("admin/periods", AdminPeriodListView.as_view(), name="admin-period-list"),
    path(
        "admin/periods/<str:period_id>",
        AdminPeriodDetailView.as_view(),
        name="admin-period-detail",
    ),
    path("admin/sessions", AdminSessionListView.as_view(), name="admin-session-list"),
    path(
        "admin/sessions/<str:session_id>",
        AdminSessionDetailView.as_view(),
        name="admin-session-detail",
    ),
]
