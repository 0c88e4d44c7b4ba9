from __future__ import annotations

from typing import Optional

from django.core.exceptions import ValidationError
from django.http import HttpRequest

from compscore.apps.accounts.session import CURRENT_SUB_EVENT_KEY
from .models import SubEvent


def _lookup(value) -> Optional[SubEvent]:
    if not value:
        return None
    try:
        return SubEvent.objects.filter(pk=value).first()
    except (ValidationError, ValueError):
        return None


def current_sub_event(request: HttpRequest, requested=None) -> Optional[SubEvent]:
    """
    Prueba activa del request:
      - árbitro -> siempre la suya
      - resto   -> la pedida, la guardada en sesión o la primera
    La elección queda en sesión.
    """
    auth = getattr(request, "auth_session", None)
    if auth is not None and auth.is_referee:
        return _lookup(auth.sub_event_id)

    se = _lookup(requested) or _lookup(request.session.get(CURRENT_SUB_EVENT_KEY))
    if se is None:
        se = SubEvent.objects.order_by("created_at", "name").first()
    if se is not None:
        request.session[CURRENT_SUB_EVENT_KEY] = str(se.pk)
    return se


def resolve_sub_event(value: str) -> SubEvent:
    """
    Prueba por id (UUID) o, si no, por nombre exacto.
    Lanza SubEvent.DoesNotExist / MultipleObjectsReturned.
    """
    found = _lookup(value)
    if found is not None:
        return found
    matches = list(SubEvent.objects.filter(name=value))
    if len(matches) > 1:
        raise SubEvent.MultipleObjectsReturned(f"Hay {len(matches)} pruebas llamadas '{value}'; use el id.")
    if not matches:
        raise SubEvent.DoesNotExist(f"Prueba '{value}' no existe.")
    return matches[0]
