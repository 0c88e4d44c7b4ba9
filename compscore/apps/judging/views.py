# compscore/apps/judging/views.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.contrib import messages
from django.http import Http404, HttpRequest, HttpResponse, HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from compscore.apps.accounts.decorators import scorer_required
from compscore.apps.events.models import Competition, SubEvent
from compscore.apps.events.selection import current_sub_event
from compscore.apps.leaderboard.services.ranking import rank_entries
from compscore.apps.registration.forms import RosterUploadForm
from compscore.apps.registration.models import RosterItem
from compscore.apps.scoring.exceptions import NotFoundError, RemoteIOError
from compscore.apps.scoring.models import Entry
from compscore.apps.scoring.services import entries as entry_services
from .forms import EntryForm

logger = logging.getLogger(__name__)

LAST_GROUP_KEY = "compscore_last_group"


# -------------------------------
# Utilidades
# -------------------------------
def _fill_from_roster(sub_event: SubEvent, data: Dict[str, Any]) -> Dict[str, Any]:
    """Nombre y grupo desde la nómina cuando el código está inscripto."""
    match = RosterItem.objects.filter(sub_event=sub_event, participant_id=data["participant_id"]).first()
    if match is not None:
        if not (data.get("participant_name") or "").strip():
            data["participant_name"] = match.name
        data["group"] = match.group
    return data


def _console_context(request: HttpRequest, sub_event: Optional[SubEvent], form: EntryForm, editing: Optional[Entry] = None) -> Dict[str, Any]:
    ctx: Dict[str, Any] = {
        "sub_event": sub_event,
        "sub_events": SubEvent.objects.all() if request.auth_session.is_admin else [],
        "form": form,
        "editing": editing,
        "roster_form": RosterUploadForm(),
    }
    if sub_event is not None:
        entries = list(Entry.objects.filter(sub_event=sub_event).order_by("timestamp", "id"))
        roster = list(RosterItem.objects.filter(sub_event=sub_event))
        ctx.update(
            entries=sorted(entries, key=lambda e: e.timestamp, reverse=True),
            roster_count=len(roster),
            standings=rank_entries(entries, roster),
            award_config=Competition.load().award_config(),
        )
    return ctx


def _check_can_score(request: HttpRequest, sub_event: SubEvent) -> Optional[HttpResponse]:
    if not request.auth_session.can_score(sub_event):
        return HttpResponseForbidden("No tienes permiso sobre esta prueba.")
    return None


# -------------------------------
# Consola de carga
# -------------------------------
@scorer_required
def console(request: HttpRequest) -> HttpResponse:
    sub_event = current_sub_event(request, request.GET.get("sub_event"))
    if sub_event is not None:
        denied = _check_can_score(request, sub_event)
        if denied:
            return denied
    form = EntryForm(initial={"group": request.session.get(LAST_GROUP_KEY, "junior")})
    return render(request, "judging/console.html", _console_context(request, sub_event, form))


@scorer_required
@require_POST
def entry_add(request: HttpRequest, sub_event_id) -> HttpResponse:
    sub_event = get_object_or_404(SubEvent, pk=sub_event_id)
    denied = _check_can_score(request, sub_event)
    if denied:
        return denied

    form = EntryForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Hay errores en el formulario. Revisa los campos.")
        return render(request, "judging/console.html", _console_context(request, sub_event, form), status=400)

    data = _fill_from_roster(sub_event, form.entry_kwargs())
    try:
        entry = entry_services.create_entry(sub_event, **data)
    except RemoteIOError as exc:
        messages.error(request, f"{exc} Se recargaron los datos.")
        return redirect("judging:console")

    # El grupo elegido se mantiene para la próxima carga
    request.session[LAST_GROUP_KEY] = form.cleaned_data["group"]
    messages.success(request, f"Marca guardada: {entry.participant_id} · ronda {entry.round}.")
    return redirect("judging:console")


@scorer_required
def entry_edit(request: HttpRequest, entry_id) -> HttpResponse:
    entry = get_object_or_404(Entry.objects.select_related("sub_event"), pk=entry_id)
    denied = _check_can_score(request, entry.sub_event)
    if denied:
        return denied

    if request.method == "POST":
        if "cancel" in request.POST:
            return redirect("judging:console")
        form = EntryForm(request.POST)
        if form.is_valid():
            try:
                entry_services.replace_entry(entry.pk, **_fill_from_roster(entry.sub_event, form.entry_kwargs()))
            except NotFoundError:
                raise Http404("La marca ya no existe.")
            except RemoteIOError as exc:
                messages.error(request, f"{exc} Se recargaron los datos.")
                return redirect("judging:console")
            messages.success(request, "Marca actualizada.")
            return redirect("judging:console")
        messages.error(request, "Hay errores en el formulario. Revisa los campos.")
    else:
        form = EntryForm.from_entry(entry)

    return render(request, "judging/console.html", _console_context(request, entry.sub_event, form, editing=entry))


@scorer_required
@require_POST
def entry_delete(request: HttpRequest, entry_id) -> HttpResponse:
    entry = get_object_or_404(Entry.objects.select_related("sub_event"), pk=entry_id)
    denied = _check_can_score(request, entry.sub_event)
    if denied:
        return denied
    try:
        entry_services.delete_entry(entry.pk)
    except NotFoundError:
        messages.warning(request, "La marca ya había sido eliminada.")
    except RemoteIOError as exc:
        messages.error(request, f"{exc} Se recargaron los datos.")
    else:
        messages.success(request, "Marca eliminada.")
    return redirect("judging:console")
