# compscore/apps/scoring/services/entries.py
"""
Alta / reemplazo / baja de marcas contra la BD.

Invariante: a lo sumo una marca por (participant_id, round, sub_event).
El alta es un upsert sobre esa clave compuesta; el reemplazo descarta la
marca que haya quedado colisionando.
"""
from __future__ import annotations

import logging
import math
import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from compscore.apps.events.models import SubEvent
from ..constants import GROUPS, JUNIOR, ROUNDS
from ..exceptions import NotFoundError, RemoteIOError
from ..models import Entry

logger = logging.getLogger(__name__)


# ---------- Validación ----------

def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return num if math.isfinite(num) else None


def _to_round(value: Any) -> Optional[int]:
    # Sólo enteros: 1.5 o True no son rondas
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def validate_entry_fields(
    participant_id: Any,
    score: Any,
    time: Any,
    round: Any = 1,
    group: Any = JUNIOR,
) -> Tuple[str, float, float, int, str]:
    """
    Normaliza y valida los campos de una marca.
    Devuelve (participant_id, score, time, round, group) o lanza
    ValidationError con el/los campo(s) que fallaron.
    """
    errors: Dict[str, str] = {}

    pid = str(participant_id or "").strip()
    if not pid:
        errors["participant_id"] = "Ingrese el código del participante."

    num_score = _to_number(score)
    if num_score is None or num_score < 0:
        errors["score"] = "Ingrese un puntaje válido (número >= 0)."

    num_time = _to_number(time)
    if num_time is None or num_time <= 0:
        errors["time"] = "Ingrese un tiempo válido (segundos > 0)."

    rnd = _to_round(round)
    if rnd not in ROUNDS:
        errors["round"] = "La ronda debe ser 1 o 2."

    grp = group or JUNIOR
    if grp not in GROUPS:
        errors["group"] = "Grupo inválido."

    if errors:
        raise ValidationError(errors)
    return pid, num_score, num_time, rnd, grp


def _get_sub_event(sub_event) -> SubEvent:
    if isinstance(sub_event, SubEvent):
        return sub_event
    try:
        return SubEvent.objects.get(pk=sub_event)
    except (SubEvent.DoesNotExist, ValidationError, ValueError):
        raise NotFoundError(f"Prueba '{sub_event}' no existe.")


# ---------- Mutaciones ----------

def create_entry(
    sub_event,
    *,
    participant_id: Any,
    participant_name: str = "",
    group: str = JUNIOR,
    round: Any,
    score: Any,
    time: Any,
    entry_id: Optional[uuid.UUID] = None,
    timestamp: Optional[datetime] = None,
) -> Entry:
    """
    Alta con reemplazo: borra cualquier marca previa del mismo
    (participante, ronda, prueba) y crea la nueva.
    """
    pid, num_score, num_time, rnd, grp = validate_entry_fields(participant_id, score, time, round, group)
    se = _get_sub_event(sub_event)
    name = (participant_name or "").strip() or pid

    try:
        with transaction.atomic():
            replaced, _ = Entry.objects.filter(sub_event=se, participant_id=pid, round=rnd).delete()
            entry = Entry.objects.create(
                id=entry_id or uuid.uuid4(),
                sub_event=se,
                participant_id=pid,
                participant_name=name,
                group=grp,
                round=rnd,
                score=num_score,
                time=num_time,
                timestamp=timestamp or timezone.now(),
            )
    except DatabaseError as exc:
        logger.error("No se pudo guardar la marca de %s (R%s): %s", pid, rnd, exc)
        raise RemoteIOError("No se pudo guardar la marca.") from exc

    if replaced:
        logger.info("Marca %s R%s en '%s' reemplazada", pid, rnd, se.name)
    return entry


def replace_entry(
    entry_id,
    *,
    participant_id: Any,
    participant_name: str = "",
    group: str = JUNIOR,
    round: Any,
    score: Any,
    time: Any,
) -> Entry:
    """
    Reemplazo completo de una marca existente (mismo id, mismo timestamp).
    Si tras el cambio otra marca comparte la clave compuesta, se elimina.
    """
    pid, num_score, num_time, rnd, grp = validate_entry_fields(participant_id, score, time, round, group)

    try:
        with transaction.atomic():
            try:
                entry = Entry.objects.select_for_update().get(pk=entry_id)
            except (Entry.DoesNotExist, ValidationError, ValueError):
                raise NotFoundError(f"Marca '{entry_id}' no existe.")

            entry.participant_id = pid
            entry.participant_name = (participant_name or "").strip() or pid
            entry.group = grp
            entry.round = rnd
            entry.score = num_score
            entry.time = num_time
            entry.save()

            dropped, _ = (
                Entry.objects.filter(sub_event_id=entry.sub_event_id, participant_id=pid, round=rnd)
                .exclude(pk=entry.pk)
                .delete()
            )
    except DatabaseError as exc:
        logger.error("No se pudo actualizar la marca %s: %s", entry_id, exc)
        raise RemoteIOError("No se pudo actualizar la marca.") from exc

    if dropped:
        logger.info("Marca %s R%s: %s duplicado(s) descartado(s)", pid, rnd, dropped)
    return entry


def delete_entry(entry_id) -> None:
    try:
        deleted, _ = Entry.objects.filter(pk=entry_id).delete()
    except ValidationError:
        deleted = 0
    except DatabaseError as exc:
        logger.error("No se pudo borrar la marca %s: %s", entry_id, exc)
        raise RemoteIOError("No se pudo borrar la marca.") from exc
    if not deleted:
        raise NotFoundError(f"Marca '{entry_id}' no existe.")
