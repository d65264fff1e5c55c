"""Attaches an AuthContext to every request.

Must run after django.contrib.sessions.middleware.SessionMiddleware.
"""

from trips.auth_context import AuthContext


class AuthContextMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.auth_context = AuthContext(request.session)
        return self.get_response(request)
