# compscore/apps/judging/api.py
"""
API JSON de marcas (la usan la pantalla y clientes externos).
Lectura pública; escritura sólo para admin o el árbitro de la prueba.
"""
from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_http_methods

from compscore.apps.events.models import SubEvent
from compscore.apps.scoring.exceptions import NotFoundError, RemoteIOError
from compscore.apps.scoring.models import Entry
from compscore.apps.scoring.records import EntryRecord
from compscore.apps.scoring.services import entries as entry_services

logger = logging.getLogger(__name__)


def _error(status: int, message: str, **extra) -> JsonResponse:
    payload: Dict[str, Any] = {"error": message}
    payload.update(extra)
    return JsonResponse(payload, status=status)


def _body(request: HttpRequest) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _entry_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "participant_id": data.get("participantId"),
        "participant_name": data.get("participantName") or "",
        "group": data.get("group") or "junior",
        "round": data.get("round"),
        "score": data.get("score"),
        "time": data.get("time"),
    }


def _sub_event_or_none(value) -> Optional[SubEvent]:
    if not value:
        return None
    try:
        return SubEvent.objects.filter(pk=value).first()
    except (ValidationError, ValueError):
        return None


def _forbidden_unless_scorer(request: HttpRequest, sub_event) -> Optional[JsonResponse]:
    if not request.auth_session.can_score(sub_event):
        status = 403 if request.user.is_authenticated else 401
        return _error(status, "No autorizado.")
    return None


@require_http_methods(["GET", "POST"])
def entries_collection(request: HttpRequest) -> JsonResponse:
    if request.method == "GET":
        qs = Entry.objects.all().order_by("timestamp", "id")
        sub_event_id = request.GET.get("subEventId")
        if sub_event_id:
            se = _sub_event_or_none(sub_event_id)
            if se is None:
                return _error(404, "Prueba inexistente.")
            qs = qs.filter(sub_event=se)
        return JsonResponse([EntryRecord.from_model(e).as_json() for e in qs], safe=False)

    data = _body(request)
    if data is None:
        return _error(400, "JSON inválido.")
    se = _sub_event_or_none(data.get("subEventId"))
    if se is None:
        return _error(404, "Prueba inexistente.")
    denied = _forbidden_unless_scorer(request, se)
    if denied:
        return denied

    try:
        entry_id = uuid.UUID(str(data["id"])) if data.get("id") else None
    except ValueError:
        return _error(400, "Validación fallida.", errors={"id": ["Id inválido."]})

    try:
        entry = entry_services.create_entry(se, entry_id=entry_id, **_entry_fields(data))
    except ValidationError as exc:
        return _error(400, "Validación fallida.", errors=exc.message_dict)
    except RemoteIOError as exc:
        logger.warning("API marcas: %s", exc)
        return _error(503, str(exc))
    return JsonResponse(EntryRecord.from_model(entry).as_json(), status=201)


@require_http_methods(["PUT", "DELETE"])
def entry_detail(request: HttpRequest, entry_id) -> JsonResponse:
    entry = Entry.objects.filter(pk=entry_id).select_related("sub_event").first()
    if entry is None:
        return _error(404, "Marca inexistente.")
    denied = _forbidden_unless_scorer(request, entry.sub_event)
    if denied:
        return denied

    try:
        if request.method == "DELETE":
            entry_services.delete_entry(entry.pk)
            return JsonResponse({"ok": True})

        data = _body(request)
        if data is None:
            return _error(400, "JSON inválido.")
        updated = entry_services.replace_entry(entry.pk, **_entry_fields(data))
    except ValidationError as exc:
        return _error(400, "Validación fallida.", errors=exc.message_dict)
    except NotFoundError as exc:
        return _error(404, str(exc))
    except RemoteIOError as exc:
        logger.warning("API marcas: %s", exc)
        return _error(503, str(exc))
    return JsonResponse(EntryRecord.from_model(updated).as_json())
