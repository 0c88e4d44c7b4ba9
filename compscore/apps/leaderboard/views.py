from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse, HttpResponseForbidden, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET

from compscore.apps.accounts.decorators import scorer_required
from compscore.apps.events.models import Competition, SubEvent
from compscore.apps.registration.models import RosterItem
from compscore.apps.scoring.constants import GROUP_LABELS, GROUPS
from compscore.apps.scoring.models import Entry
from .services.awards import AwardConfig, assign_awards, award_label
from .services.export import format_number, standings_csv
from .services.ranking import ParticipantStats, rank_entries

logger = logging.getLogger(__name__)

EXPORT_GROUPS = {"junior": ("junior",), "senior": ("senior",), "all": GROUPS}


# ---------- Utilidades ----------

def _standings_for(sub_event: SubEvent) -> Dict[str, List[ParticipantStats]]:
    entries = Entry.objects.filter(sub_event=sub_event).order_by("timestamp", "id")
    roster = RosterItem.objects.filter(sub_event=sub_event)
    return rank_entries(entries, roster)


def _round_cell(entry) -> Optional[Dict[str, Any]]:
    if entry is None:
        return None
    return {"score": entry.score, "time": entry.time}


def _group_tables(standings: Dict[str, List[ParticipantStats]], config: AwardConfig) -> List[Dict[str, Any]]:
    """
    Una tabla por grupo, con el premio ya resuelto por fila:
      [{"group": "junior", "label": "Junior", "rows": [...]}, ...]
    """
    tables = []
    for group in GROUPS:
        stats = standings.get(group, [])
        rows = []
        for stat, award in zip(stats, assign_awards(stats, config)):
            best = stat.best_entry
            rows.append(
                {
                    "rank": stat.rank,
                    "participant_id": stat.participant_id,
                    "name": stat.participant_name,
                    "score": format_number(best.score if best else None),
                    "time": format_number(best.time if best else None),
                    "best_round": best.round if best else None,
                    "round1": _round_cell(stat.round1),
                    "round2": _round_cell(stat.round2),
                    "award": award,
                    "award_label": award_label(award, empty=""),
                }
            )
        tables.append({"group": group, "label": GROUP_LABELS[group], "rows": rows})
    return tables


# ---------- Vistas ----------

def board(request: HttpRequest, sub_event_id) -> HttpResponse:
    """Clasificación completa de una prueba, con premios por grupo."""
    sub_event = get_object_or_404(SubEvent, pk=sub_event_id)
    config = Competition.load().award_config()
    tables = _group_tables(_standings_for(sub_event), config)
    can_export = request.auth_session.can_score(sub_event)
    return render(
        request,
        "leaderboard/board.html",
        {
            "sub_event": sub_event,
            "sub_events": SubEvent.objects.all(),
            "tables": tables,
            "award_config": config,
            "can_export": can_export,
        },
    )


@scorer_required
@require_GET
def export_csv(request: HttpRequest, sub_event_id) -> HttpResponse:
    sub_event = get_object_or_404(SubEvent, pk=sub_event_id)
    if not request.auth_session.can_score(sub_event):
        return HttpResponseForbidden("No tienes permiso sobre esta prueba.")

    group = request.GET.get("group", "all")
    if group not in EXPORT_GROUPS:
        raise Http404("Grupo inválido.")

    content = standings_csv(
        _standings_for(sub_event),
        Competition.load().award_config(),
        groups=EXPORT_GROUPS[group],
    )
    filename = f"ranking_{group}_{timezone.localdate():%Y%m%d}.csv"
    response = HttpResponse(content, content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    logger.info("Exportación CSV %s (%s) por %s", sub_event.name, group, request.auth_session.username)
    return response


def display(request: HttpRequest, sub_event_id=None) -> HttpResponse:
    """
    Pantalla pública (modo proyector). Sin prueba en la URL toma la primera;
    la página consulta /api/standings/<id>/ cada COMPSCORE_DISPLAY_REFRESH_SECONDS.
    """
    if sub_event_id is None:
        first = SubEvent.objects.first()
        if first is not None:
            return redirect("display_sub_event", sub_event_id=first.pk)
        sub_event = None
        tables: List[Dict[str, Any]] = []
    else:
        sub_event = get_object_or_404(SubEvent, pk=sub_event_id)
        tables = _group_tables(_standings_for(sub_event), Competition.load().award_config())

    return render(
        request,
        "leaderboard/display.html",
        {
            "sub_event": sub_event,
            "sub_events": SubEvent.objects.all(),
            "tables": tables,
            "refresh_seconds": settings.COMPSCORE_DISPLAY_REFRESH_SECONDS,
        },
    )


@require_GET
def api_standings(request: HttpRequest, sub_event_id) -> JsonResponse:
    sub_event = SubEvent.objects.filter(pk=sub_event_id).first()
    if sub_event is None:
        return JsonResponse({"error": "Prueba inexistente."}, status=404)
    config = Competition.load().award_config()
    return JsonResponse(
        {
            "subEvent": {"id": str(sub_event.pk), "name": sub_event.name},
            "awardConfig": config.as_dict(),
            "updatedAt": timezone.now().isoformat(),
            "groups": _group_tables(_standings_for(sub_event), config),
        }
    )
