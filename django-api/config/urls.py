"""URL configuration for the Tahwisa trips API."""

from django.http import JsonResponse
from django.urls import include, path


def health_check(request):
    """Health check endpoint for Docker/Kubernetes."""
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("health/", health_check, name="health"),
    path("api/", include("trips.urls")),
]
