"""Mapping of domain errors to HTTP responses.

Installed as the REST framework EXCEPTION_HANDLER. Responses carry a
stable code and a user-safe message; internal details are only logged.
"""

import logging

from django.conf import settings
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from trips.domain.errors import (
    AuthorizationError,
    DomainError,
    DomainRejectedError,
    ErrorCode,
    ForbiddenError,
    InvalidIdError,
    NotFoundError,
    RegistrationRefusedError,
    TransportError,
)

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please correct the highlighted fields."


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return domain_error_response(context.get("request"), exc)
    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {
                "code": ErrorCode.VALIDATION_FAILED.value,
                "message": VALIDATION_MESSAGE,
                "errors": exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
    return exception_handler(exc, context)


def domain_error_response(request, exc: DomainError) -> Response:
    body = {"code": exc.code.value, "message": exc.message}

    if isinstance(exc, AuthorizationError):
        if request is not None:
            request.auth_context.invalidate()
        body["redirect"] = settings.LOGIN_URL
        return Response(body, status=status.HTTP_401_UNAUTHORIZED)
    if isinstance(exc, DomainRejectedError):
        if exc.remote_code:
            body["code"] = exc.remote_code
        return Response(body, status=exc.status_code)
    if isinstance(exc, RegistrationRefusedError):
        body["reason"] = exc.reason.value
        return Response(body, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, ForbiddenError):
        return Response(body, status=status.HTTP_403_FORBIDDEN)
    if isinstance(exc, NotFoundError):
        return Response(body, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, InvalidIdError):
        return Response(body, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, TransportError):
        logger.warning("Remote API unavailable: %s", exc.detail)
        return Response(body, status=status.HTTP_502_BAD_GATEWAY)

    logger.error("Unmapped domain error: %s", exc)
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
