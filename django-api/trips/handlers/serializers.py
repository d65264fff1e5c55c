"""Serializers for transforming domain models to API responses, and for
validating request bodies before any call to the remote API.
"""

from datetime import date, datetime, time, timezone

from rest_framework import serializers

from trips.domain import (
    AccountRegistration,
    Capacity,
    DestinationDraft,
    DestinationId,
    DestinationKind,
    PeriodDraft,
    PeriodId,
    PeriodState,
    PeriodStatus,
    ProfileUpdate,
    SessionDraft,
)
from trips.domain.history import HistoryFilter


def _as_datetime(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _enum_value(member):
    return member.value if member is not None else None


# -- output ---------------------------------------------------------------


class DestinationSerializer(serializers.Serializer):
    """Serializer for Destination domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    location = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    kind = serializers.CharField(source="kind.value")
    description = serializers.CharField()


class PeriodSerializer(serializers.Serializer):
    """Serializer for Period domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    registration_deadline = serializers.DateTimeField()
    state = serializers.CharField(source="state.value")


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    destination_id = serializers.IntegerField(source="destination_id.value")
    period_id = serializers.IntegerField(source="period_id.value")
    destination_name = serializers.CharField(allow_null=True)
    period_name = serializers.CharField(allow_null=True)


class PeriodViewSerializer(serializers.Serializer):
    period = PeriodSerializer()
    status = serializers.CharField(source="status.value")
    registration_open = serializers.BooleanField()
    days_until_deadline = serializers.IntegerField()
    duration_days = serializers.IntegerField()


class PeriodPageSerializer(serializers.Serializer):
    periods = PeriodViewSerializer(many=True)
    total_count = serializers.IntegerField()
    filtered_count = serializers.IntegerField()
    open_count = serializers.IntegerField()


class SessionViewSerializer(serializers.Serializer):
    session = SessionSerializer()
    status = serializers.CharField(source="status.value")
    duration_days = serializers.IntegerField()
    destination = DestinationSerializer(allow_null=True)
    period = PeriodSerializer(allow_null=True)


class InscriptionSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="id.value")
    employee_id = serializers.IntegerField(source="employee_id.value")
    session_id = serializers.IntegerField(source="session_id.value")
    registered_at = serializers.DateTimeField()
    status = serializers.CharField(source="status.value")
    employee_name = serializers.CharField(allow_null=True)
    session_name = serializers.CharField(allow_null=True)


class EmployeeSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="id.value")
    last_name = serializers.CharField()
    first_name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    employee_code = serializers.CharField()
    structure = serializers.CharField()
    role = serializers.CharField(source="role.value")


class EligibilitySerializer(serializers.Serializer):
    allowed = serializers.BooleanField()
    reason = serializers.SerializerMethodField()

    def get_reason(self, obj):
        return _enum_value(obj.reason)


class SessionOfferSerializer(serializers.Serializer):
    session = SessionSerializer()
    period = PeriodSerializer()
    period_status = serializers.CharField(source="period_status.value")
    eligibility = EligibilitySerializer()


class RegistrationOverviewSerializer(serializers.Serializer):
    employee = EmployeeSerializer()
    offers = SessionOfferSerializer(many=True)
    inscriptions = InscriptionSerializer(many=True)


class RankedSelectionSerializer(serializers.Serializer):
    """display_index is the position after sorting, priority_order the draw rank."""

    display_index = serializers.IntegerField()
    priority_order = serializers.IntegerField()
    id = serializers.IntegerField(source="record.id.value")
    session_id = serializers.IntegerField(source="record.session_id.value")
    employee_id = serializers.IntegerField(source="record.employee_id.value")
    selection_type = serializers.CharField(source="record.selection_type.value")
    selected_at = serializers.DateTimeField(source="record.selected_at")
    employee_last_name = serializers.CharField(source="record.employee_last_name", allow_null=True)
    employee_first_name = serializers.CharField(source="record.employee_first_name", allow_null=True)
    session_name = serializers.CharField(source="record.session_name", allow_null=True)


class SelectionPartitionSerializer(serializers.Serializer):
    official = RankedSelectionSerializer(many=True)
    substitute = RankedSelectionSerializer(many=True)
    official_count = serializers.IntegerField()
    substitute_count = serializers.IntegerField()
    total_count = serializers.IntegerField()
    is_empty = serializers.BooleanField()


class DrawReportSerializer(serializers.Serializer):
    outcome = serializers.CharField(source="outcome.value")
    message = serializers.CharField()
    partition = SelectionPartitionSerializer(allow_null=True)


class HistoryRowSerializer(serializers.Serializer):
    inscription_id = serializers.IntegerField(source="inscription_id.value")
    employee_id = serializers.IntegerField(source="employee_id.value")
    last_name = serializers.CharField()
    first_name = serializers.CharField()
    session_name = serializers.CharField()
    registration_date = serializers.CharField()
    status = serializers.CharField(source="status.value")
    destination_name = serializers.CharField(allow_null=True)
    period_name = serializers.CharField(allow_null=True)


class HistoryPageSerializer(serializers.Serializer):
    rows = HistoryRowSerializer(many=True)
    total_count = serializers.IntegerField()
    filtered_count = serializers.IntegerField()
    statuses = serializers.ListField(child=serializers.CharField())
    years = serializers.ListField(child=serializers.CharField())


class DashboardSerializer(serializers.Serializer):
    employee = EmployeeSerializer()
    total_sessions = serializers.IntegerField()
    sessions_by_status = serializers.SerializerMethodField()
    active_registrations = serializers.IntegerField()
    completed_trips = serializers.IntegerField()
    recent_sessions = SessionViewSerializer(many=True)
    recent_inscriptions = InscriptionSerializer(many=True)

    def get_sessions_by_status(self, obj):
        return {status.value: count for status, count in obj.sessions_by_status.items()}


# -- input ----------------------------------------------------------------


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6)


class EmailSerializer(serializers.Serializer):
    email = serializers.EmailField()


class TokenSerializer(serializers.Serializer):
    token = serializers.CharField()


class PasswordResetSerializer(serializers.Serializer):
    token = serializers.CharField()
    password = serializers.CharField(min_length=6)


class AccountRegistrationSerializer(serializers.Serializer):
    last_name = serializers.CharField(min_length=2)
    first_name = serializers.CharField(min_length=2)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6)
    phone = serializers.CharField(min_length=10)
    employee_code = serializers.CharField(min_length=3)
    department = serializers.CharField(min_length=2)

    def build(self) -> AccountRegistration:
        return AccountRegistration(**self.validated_data)


class ProfileUpdateSerializer(serializers.Serializer):
    last_name = serializers.CharField(min_length=2)
    first_name = serializers.CharField(min_length=2)
    email = serializers.EmailField()
    phone = serializers.CharField(allow_blank=True, default="")
    structure = serializers.CharField(allow_blank=True, default="")
    # blank keeps the current password
    password = serializers.CharField(min_length=6, required=False, allow_blank=True)

    def build(self) -> ProfileUpdate:
        data = dict(self.validated_data)
        data["password"] = data.get("password") or None
        return ProfileUpdate(**data)


class RegistrationRequestSerializer(serializers.Serializer):
    session_id = serializers.IntegerField(min_value=1)


class HistoryQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    year = serializers.RegexField(r"^\d{4}$", required=False, allow_blank=True, default="")
    status = serializers.CharField(required=False, allow_blank=True, default="")

    def build(self) -> HistoryFilter:
        data = self.validated_data
        return HistoryFilter(search_text=data["search"], year=data["year"], status=data["status"])


class PeriodQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    status = serializers.ChoiceField(
        choices=[status.value for status in PeriodStatus], required=False, allow_blank=True, default=""
    )


class DestinationInputSerializer(serializers.Serializer):
    name = serializers.CharField()
    location = serializers.CharField()
    capacity = serializers.IntegerField(min_value=1)
    kind = serializers.ChoiceField(choices=[kind.value for kind in DestinationKind])
    description = serializers.CharField(required=False, allow_blank=True, default="")

    def build(self) -> DestinationDraft:
        data = self.validated_data
        return DestinationDraft(
            name=data["name"],
            location=data["location"],
            capacity=Capacity(data["capacity"]),
            kind=DestinationKind(data["kind"]),
            description=data["description"],
        )


class PeriodInputSerializer(serializers.Serializer):
    name = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    registration_deadline = serializers.DateField()
    state = serializers.ChoiceField(
        choices=[state.value for state in PeriodState], default=PeriodState.OPEN.value
    )

    def validate(self, attrs):
        try:
            attrs["draft"] = PeriodDraft(
                name=attrs["name"],
                start_date=_as_datetime(attrs["start_date"]),
                end_date=_as_datetime(attrs["end_date"]),
                registration_deadline=_as_datetime(attrs["registration_deadline"]),
                state=PeriodState(attrs["state"]),
            )
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from exc
        return attrs

    def build(self) -> PeriodDraft:
        return self.validated_data["draft"]


class SessionInputSerializer(serializers.Serializer):
    name = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    destination_id = serializers.IntegerField(min_value=1)
    period_id = serializers.IntegerField(min_value=1)

    def validate(self, attrs):
        try:
            attrs["draft"] = SessionDraft(
                name=attrs["name"],
                start_date=_as_datetime(attrs["start_date"]),
                end_date=_as_datetime(attrs["end_date"]),
                destination_id=DestinationId(attrs["destination_id"]),
                period_id=PeriodId(attrs["period_id"]),
            )
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from exc
        return attrs

    def build(self) -> SessionDraft:
        return self.validated_data["draft"]
