from __future__ import annotations

from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.http import HttpRequest, HttpResponseForbidden


def _role_required(check, denied_message: str):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request: HttpRequest, *args, **kwargs):
            if not request.user.is_authenticated:
                return redirect_to_login(request.get_full_path())
            if not check(request.auth_session):
                return HttpResponseForbidden(denied_message)
            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator


# Sólo el administrador de la competencia
admin_required = _role_required(lambda s: s.is_admin, "Solo administrador.")

# Administrador o árbitro (la prueba concreta se valida en la vista)
scorer_required = _role_required(lambda s: s.is_admin or s.is_referee, "Solo árbitros.")
