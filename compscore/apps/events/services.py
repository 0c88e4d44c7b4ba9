from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from .models import Competition, SubEvent

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError({"name": "El nombre no puede estar vacío."})
    return name


def create_sub_event(name: str) -> SubEvent:
    se = SubEvent.objects.create(name=_clean_name(name))
    logger.info("Prueba '%s' creada (%s)", se.name, se.pk)
    return se


def rename_sub_event(sub_event: SubEvent, name: str) -> SubEvent:
    sub_event.name = _clean_name(name)
    sub_event.save(update_fields=["name"])
    return sub_event


@transaction.atomic
def delete_sub_event(sub_event: SubEvent) -> dict:
    """
    Borra la prueba con sus marcas, nómina y árbitros (cascada).
    Devuelve el conteo por modelo.
    """
    name = sub_event.name
    _, per_model = sub_event.delete()
    logger.info("Prueba '%s' eliminada: %s", name, per_model)
    return per_model


def update_competition(name: str, first: int, second: int, third: int) -> Competition:
    from compscore.apps.leaderboard.services.awards import AwardConfig

    config = AwardConfig(first=first, second=second, third=third)  # valida 0..100
    comp = Competition.load()
    comp.name = _clean_name(name)
    comp.award_first = config.first
    comp.award_second = config.second
    comp.award_third = config.third
    comp.save()
    return comp
