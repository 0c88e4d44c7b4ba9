# compscore/apps/scoring/services/store.py
from __future__ import annotations

import logging
from typing import Iterable, List

from django.db import DatabaseError

from ..exceptions import RemoteIOError
from ..models import Entry
from ..records import EntryRecord, RosterRecord
from . import entries as entry_services

logger = logging.getLogger(__name__)


class OrmStore:
    """
    Fuente de verdad para ScoreboardState: la BD vía el ORM.
    Cualquier fallo de BD sale como RemoteIOError.
    """

    def list_entries(self, sub_event_id) -> List[EntryRecord]:
        try:
            qs = Entry.objects.filter(sub_event_id=sub_event_id).order_by("timestamp", "id")
            return [EntryRecord.from_model(e) for e in qs]
        except DatabaseError as exc:
            raise RemoteIOError("No se pudieron leer las marcas.") from exc

    def list_roster(self, sub_event_id) -> List[RosterRecord]:
        from compscore.apps.registration.models import RosterItem

        try:
            qs = RosterItem.objects.filter(sub_event_id=sub_event_id).order_by("participant_id")
            return [RosterRecord.from_model(r) for r in qs]
        except DatabaseError as exc:
            raise RemoteIOError("No se pudo leer la nómina.") from exc

    def add_entry(self, record: EntryRecord) -> EntryRecord:
        entry = entry_services.create_entry(
            record.sub_event_id,
            participant_id=record.participant_id,
            participant_name=record.participant_name,
            group=record.group,
            round=record.round,
            score=record.score,
            time=record.time,
            entry_id=record.id,
            timestamp=record.timestamp,
        )
        return EntryRecord.from_model(entry)

    def update_entry(self, record: EntryRecord) -> EntryRecord:
        entry = entry_services.replace_entry(
            record.id,
            participant_id=record.participant_id,
            participant_name=record.participant_name,
            group=record.group,
            round=record.round,
            score=record.score,
            time=record.time,
        )
        return EntryRecord.from_model(entry)

    def delete_entry(self, entry_id) -> None:
        entry_services.delete_entry(entry_id)

    def import_roster(self, sub_event_id, rows: Iterable[RosterRecord]) -> int:
        from compscore.apps.registration.services.importer import upsert_roster

        return upsert_roster(sub_event_id, rows)
