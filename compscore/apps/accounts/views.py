from __future__ import annotations

from django.contrib import messages
from django.contrib.auth import views as auth_views
from django.shortcuts import redirect
from django.views.decorators.http import require_http_methods

from .session import close_session, open_session


class CustomLoginView(auth_views.LoginView):
    template_name = "registration/login.html"

    def form_valid(self, form):
        session = open_session(self.request, form.get_user())
        if not session.is_authenticated:
            messages.warning(self.request, "Tu usuario no tiene rol asignado en esta competencia.")
        return redirect(self.get_success_url())


@require_http_methods(["GET", "POST"])
def logout_view(request):
    close_session(request)
    return redirect("home")
