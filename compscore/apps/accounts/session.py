# compscore/apps/accounts/session.py
"""
Sesión de autenticación explícita.

AuthSession es un valor inmutable que se arma a partir del usuario del
request (AuthSessionMiddleware) y viaja en request.auth_session. Las únicas
transiciones son open_session (login) y close_session (logout).
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import login as django_login, logout as django_logout
from django.http import HttpRequest

logger = logging.getLogger(__name__)

ADMIN = "admin"
REFEREE = "referee"
ANONYMOUS = "anonymous"

CURRENT_SUB_EVENT_KEY = "compscore_current_sub_event"


@dataclass(frozen=True)
class AuthSession:
    role: str = ANONYMOUS
    username: str = ""
    sub_event_id: Optional[uuid.UUID] = None

    @property
    def is_authenticated(self) -> bool:
        return self.role != ANONYMOUS

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN

    @property
    def is_referee(self) -> bool:
        return self.role == REFEREE

    def can_score(self, sub_event) -> bool:
        """Admin carga en cualquier prueba; el árbitro sólo en la suya."""
        if self.is_admin:
            return True
        if self.is_referee and sub_event is not None:
            return str(getattr(sub_event, "pk", sub_event)) == str(self.sub_event_id)
        return False

    @classmethod
    def from_user(cls, user) -> "AuthSession":
        if user is None or not user.is_authenticated:
            return cls()
        if user.is_staff or user.is_superuser:
            return cls(role=ADMIN, username=user.get_username())

        from .models import RefereeProfile
        try:
            profile = user.referee_profile
        except RefereeProfile.DoesNotExist:
            # Usuario válido pero sin rol en la competencia
            return cls(username=user.get_username())
        return cls(role=REFEREE, username=user.get_username(), sub_event_id=profile.sub_event_id)


def open_session(request: HttpRequest, user) -> AuthSession:
    django_login(request, user)
    session = AuthSession.from_user(user)
    request.auth_session = session
    if session.is_referee:
        # El árbitro queda fijo en su prueba
        request.session[CURRENT_SUB_EVENT_KEY] = str(session.sub_event_id)
    logger.info("Login %s (%s)", session.username, session.role)
    return session


def close_session(request: HttpRequest) -> AuthSession:
    previous = getattr(request, "auth_session", None)
    django_logout(request)
    request.auth_session = AuthSession()
    if previous is not None and previous.is_authenticated:
        logger.info("Logout %s", previous.username)
    return request.auth_session
