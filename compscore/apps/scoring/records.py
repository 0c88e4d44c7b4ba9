# compscore/apps/scoring/records.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from django.utils import timezone

from .constants import JUNIOR


@dataclass(frozen=True)
class EntryRecord:
    """Copia en memoria de una marca (lo que ve el cliente)."""
    participant_id: str
    round: int
    score: float
    time: float
    sub_event_id: uuid.UUID
    participant_name: str = ""
    group: str = JUNIOR
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=timezone.now)

    @property
    def key(self):
        return (self.participant_id, int(self.round), self.sub_event_id)

    @classmethod
    def from_model(cls, entry) -> "EntryRecord":
        return cls(
            id=entry.id,
            participant_id=entry.participant_id,
            participant_name=entry.participant_name,
            group=entry.group,
            round=int(entry.round),
            score=entry.score,
            time=entry.time,
            timestamp=entry.timestamp,
            sub_event_id=entry.sub_event_id,
        )

    def as_json(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "participantId": self.participant_id,
            "participantName": self.participant_name,
            "group": self.group,
            "round": int(self.round),
            "score": self.score,
            "time": self.time,
            "timestamp": int(self.timestamp.timestamp() * 1000),
            "subEventId": str(self.sub_event_id),
        }


@dataclass(frozen=True)
class RosterRecord:
    participant_id: str
    name: str
    group: str = JUNIOR
    sub_event_id: Any = None

    @classmethod
    def from_model(cls, item) -> "RosterRecord":
        return cls(
            participant_id=item.participant_id,
            name=item.name,
            group=item.group,
            sub_event_id=item.sub_event_id,
        )

    def as_json(self) -> Dict[str, Any]:
        return {
            "id": self.participant_id,
            "name": self.name,
            "group": self.group,
            "subEventId": str(self.sub_event_id) if self.sub_event_id else None,
        }
