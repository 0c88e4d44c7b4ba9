from .session import AuthSession


class AuthSessionMiddleware:
    """Adjunta request.auth_session (va después de AuthenticationMiddleware)."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.auth_session = AuthSession.from_user(getattr(request, "user", None))
        return self.get_response(request)
