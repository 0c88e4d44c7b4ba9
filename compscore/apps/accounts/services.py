from __future__ import annotations

import logging

from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.db import transaction

from .models import RefereeProfile

logger = logging.getLogger(__name__)


@transaction.atomic
def create_referee(username: str, password: str, sub_event) -> RefereeProfile:
    username = (username or "").strip()
    password = (password or "").strip()
    errors = {}
    if not username:
        errors["username"] = "Ingrese un usuario."
    elif User.objects.filter(username=username).exists():
        errors["username"] = "El usuario ya existe."
    if not password:
        errors["password"] = "Ingrese una contraseña."
    if sub_event is None:
        errors["sub_event"] = "Seleccione la prueba."
    if errors:
        raise ValidationError(errors)

    user = User.objects.create_user(username=username, password=password)
    profile = RefereeProfile.objects.create(user=user, sub_event=sub_event)
    logger.info("Árbitro %s creado para '%s'", username, sub_event)
    return profile


def delete_referee(profile_id) -> bool:
    deleted, _ = RefereeProfile.objects.filter(pk=profile_id).delete()
    return bool(deleted)
