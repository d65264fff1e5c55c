from trips.handlers.views import (
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

__all__ = [
    "AccountRegistrationView",
    "AdminDashboardView",
    "AdminDestinationDetailView",
    "AdminDestinationListView",
    "AdminPeriodDetailView",
    "AdminPeriodListView",
    "AdminSessionDetailView",
    "AdminSessionListView",
    "DestinationListView",
    "GenerateSelectionView",
    "HistoryView",
    "LoginView",
    "LogoutView",
    "MeView",
    "PasswordResetRequestView",
    "PasswordResetView",
    "PeriodListView",
    "ProfileView",
    "RegistrationDetailView",
    "RegistrationView",
    "ResendVerificationView",
    "SelectionResultView",
    "SessionListView",
    "VerifyEmailView",
]
