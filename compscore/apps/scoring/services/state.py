# compscore/apps/scoring/services/state.py
"""
Estado de sesión del cliente de carga (consola de árbitro / pantalla).

Cada mutación es una intención en dos fases:
  1) se aplica en memoria (vista optimista),
  2) se escribe en el store.
Si la escritura falla se descarta la vista local recargando todo desde el
store y se relanza el error. No hay log de deshacer ni merge.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from compscore.apps.leaderboard.services.ranking import ParticipantStats, rank_entries
from ..constants import JUNIOR
from ..exceptions import NotFoundError, RemoteIOError
from ..records import EntryRecord, RosterRecord
from .entries import validate_entry_fields

logger = logging.getLogger(__name__)


class ScoreboardState:

    def __init__(self, store, sub_event_id) -> None:
        self.store = store
        self.sub_event_id = sub_event_id
        self.entries: List[EntryRecord] = []
        self.roster: List[RosterRecord] = []
        self.editing: Optional[EntryRecord] = None

    # ---------- Lectura ----------

    def reload(self) -> None:
        """Trae marcas y nómina desde la fuente de verdad."""
        self.entries = list(self.store.list_entries(self.sub_event_id))
        self.roster = list(self.store.list_roster(self.sub_event_id))
        if self.editing is not None:
            self.editing = self._find(self.editing.id)
        logger.debug("Estado recargado: %s marcas, %s en nómina", len(self.entries), len(self.roster))

    def refresh_entries(self) -> None:
        """Refresco liviano (sólo marcas), el que usa la pantalla en vivo."""
        self.entries = list(self.store.list_entries(self.sub_event_id))

    def standings(self) -> Dict[str, List[ParticipantStats]]:
        return rank_entries(self.entries, self.roster)

    def roster_match(self, participant_id: str) -> Optional[RosterRecord]:
        pid = (participant_id or "").strip()
        for item in self.roster:
            if item.participant_id == pid:
                return item
        return None

    def _find(self, entry_id) -> Optional[EntryRecord]:
        for e in self.entries:
            if str(e.id) == str(entry_id):
                return e
        return None

    # ---------- Edición ----------

    def begin_edit(self, entry_id) -> EntryRecord:
        entry = self._find(entry_id)
        if entry is None:
            raise NotFoundError(f"Marca '{entry_id}' no existe.")
        self.editing = entry
        return entry

    def cancel_edit(self) -> None:
        self.editing = None

    # ---------- Mutaciones ----------

    def _resync(self, action: str, exc: Exception) -> None:
        logger.warning("Falló %s (%s); recargando estado", action, exc)
        self.reload()

    def add_entry(
        self,
        participant_id: str,
        participant_name: str,
        group: str,
        round: int,
        score: float,
        time: float,
    ) -> EntryRecord:
        pid, num_score, num_time, rnd, grp = validate_entry_fields(participant_id, score, time, round, group)
        record = EntryRecord(
            participant_id=pid,
            participant_name=(participant_name or "").strip() or pid,
            group=grp,
            round=rnd,
            score=num_score,
            time=num_time,
            sub_event_id=self.sub_event_id,
        )

        # Tentativo: reemplaza la marca previa de la misma clave
        self.entries = [e for e in self.entries if e.key != record.key] + [record]

        try:
            saved = self.store.add_entry(record)
        except (RemoteIOError, NotFoundError) as exc:
            self._resync("alta", exc)
            raise

        self.entries = [saved if e.id == record.id else e for e in self.entries]
        return saved

    def update_entry(self, record: EntryRecord) -> EntryRecord:
        pid, num_score, num_time, rnd, grp = validate_entry_fields(
            record.participant_id, record.score, record.time, record.round, record.group
        )
        if self._find(record.id) is None:
            raise NotFoundError(f"Marca '{record.id}' no existe.")
        record = replace(
            record,
            participant_id=pid,
            participant_name=(record.participant_name or "").strip() or pid,
            score=num_score,
            time=num_time,
            round=rnd,
            group=grp or JUNIOR,
        )

        # Tentativo: reemplazo por id y descarte de colisiones con la clave
        updated: List[EntryRecord] = []
        for e in self.entries:
            if e.id == record.id:
                updated.append(record)
            elif e.key != record.key:
                updated.append(e)
        self.entries = updated
        self.editing = None

        try:
            saved = self.store.update_entry(record)
        except (RemoteIOError, NotFoundError) as exc:
            self._resync("actualización", exc)
            raise

        self.entries = [saved if e.id == saved.id else e for e in self.entries]
        return saved

    def remove_entry(self, entry_id) -> None:
        if self._find(entry_id) is None:
            raise NotFoundError(f"Marca '{entry_id}' no existe.")

        self.entries = [e for e in self.entries if str(e.id) != str(entry_id)]
        if self.editing is not None and str(self.editing.id) == str(entry_id):
            self.editing = None

        try:
            self.store.delete_entry(entry_id)
        except (RemoteIOError, NotFoundError) as exc:
            self._resync("baja", exc)
            raise

    def import_roster(self, rows: Iterable[RosterRecord]) -> int:
        """Sin fase optimista: se escribe y se relee la nómina."""
        count = self.store.import_roster(self.sub_event_id, rows)
        self.roster = list(self.store.list_roster(self.sub_event_id))
        return count
