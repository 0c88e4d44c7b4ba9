from __future__ import annotations

from typing import Any, Dict

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_POST

from compscore.apps.accounts.decorators import admin_required
from compscore.apps.accounts.models import RefereeProfile
from compscore.apps.accounts.services import create_referee, delete_referee
from .forms import CompetitionForm, RefereeForm, SubEventForm
from .models import Competition, SubEvent
from .selection import current_sub_event
from . import services


# -------- Utilidades --------

def _flash_validation(request: HttpRequest, exc: ValidationError) -> None:
    for msg in exc.messages:
        messages.error(request, msg)


def home(request: HttpRequest) -> HttpResponse:
    sub_events = SubEvent.objects.all()
    return render(request, "home.html", {"sub_events": sub_events})


@require_POST
def select_sub_event(request: HttpRequest) -> HttpResponse:
    """Cambia la prueba activa (guardada en sesión). El árbitro no puede cambiarla."""
    current_sub_event(request, request.POST.get("sub_event"))
    next_url = request.POST.get("next")
    # Seguridad del redirect
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()):
        return redirect(next_url)
    return redirect("judging:console")


# -------- Configuración del sistema (solo admin) --------

@admin_required
def system_settings(request: HttpRequest) -> HttpResponse:
    comp = Competition.load()
    if request.method == "POST":
        form = CompetitionForm(request.POST, instance=comp)
        if form.is_valid():
            try:
                services.update_competition(
                    form.cleaned_data["name"],
                    form.cleaned_data["award_first"],
                    form.cleaned_data["award_second"],
                    form.cleaned_data["award_third"],
                )
            except ValidationError as exc:
                _flash_validation(request, exc)
            else:
                messages.success(request, "Configuración guardada.")
                return redirect("events:settings")
        else:
            messages.error(request, "Hay errores en el formulario. Revisa los campos.")
    else:
        form = CompetitionForm(instance=comp)

    ctx: Dict[str, Any] = {
        "form": form,
        "sub_event_form": SubEventForm(),
        "referee_form": RefereeForm(),
        "sub_events": SubEvent.objects.all(),
        "referees": RefereeProfile.objects.select_related("user", "sub_event"),
    }
    return render(request, "events/settings.html", ctx)


@admin_required
@require_POST
def sub_event_create(request: HttpRequest) -> HttpResponse:
    form = SubEventForm(request.POST)
    if form.is_valid():
        se = services.create_sub_event(form.cleaned_data["name"])
        messages.success(request, f"Prueba '{se.name}' creada.")
    else:
        messages.error(request, "Ingrese el nombre de la prueba.")
    return redirect("events:settings")


@admin_required
@require_POST
def sub_event_rename(request: HttpRequest, pk) -> HttpResponse:
    se = get_object_or_404(SubEvent, pk=pk)
    try:
        services.rename_sub_event(se, request.POST.get("name", ""))
    except ValidationError as exc:
        _flash_validation(request, exc)
    else:
        messages.success(request, "Prueba renombrada.")
    return redirect("events:settings")


@admin_required
@require_POST
def sub_event_delete(request: HttpRequest, pk) -> HttpResponse:
    se = get_object_or_404(SubEvent, pk=pk)
    name = se.name
    services.delete_sub_event(se)
    messages.success(request, f"Prueba '{name}' eliminada junto con sus marcas, nómina y árbitros.")
    return redirect("events:settings")


@admin_required
@require_POST
def referee_create(request: HttpRequest) -> HttpResponse:
    form = RefereeForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Complete usuario, contraseña y prueba.")
        return redirect("events:settings")
    try:
        profile = create_referee(
            form.cleaned_data["username"],
            form.cleaned_data["password"],
            form.cleaned_data["sub_event"],
        )
    except ValidationError as exc:
        _flash_validation(request, exc)
    else:
        messages.success(request, f"Árbitro '{profile.user.username}' creado.")
    return redirect("events:settings")


@admin_required
@require_POST
def referee_delete(request: HttpRequest, pk: int) -> HttpResponse:
    if delete_referee(pk):
        messages.success(request, "Árbitro eliminado.")
    else:
        messages.error(request, "El árbitro no existe.")
    return redirect("events:settings")


# -------- API --------

@require_GET
def api_info(request: HttpRequest) -> JsonResponse:
    comp = Competition.load()
    return JsonResponse({
        "name": comp.name,
        "awardConfig": comp.award_config().as_dict(),
        "subEvents": [{"id": str(se.pk), "name": se.name} for se in SubEvent.objects.all()],
    })


def health(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"ok": True})
