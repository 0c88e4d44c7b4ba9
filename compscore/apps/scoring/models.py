# compscore/apps/scoring/models.py
from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone

from .constants import GROUP_CHOICES, JUNIOR, ROUND_CHOICES


class Entry(models.Model):
    """
    Marca cargada por un árbitro: una ronda de un participante en una prueba.
    A lo sumo una por (participant_id, round, sub_event); la unicidad la
    garantiza el reemplazo al insertar (services.entries), no la BD.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sub_event = models.ForeignKey(
        "events.SubEvent",
        on_delete=models.CASCADE,
        related_name="entries",
    )
    participant_id = models.CharField(max_length=64)
    participant_name = models.CharField(max_length=160, blank=True, default="")
    group = models.CharField(max_length=8, choices=GROUP_CHOICES, default=JUNIOR)
    round = models.PositiveSmallIntegerField(choices=ROUND_CHOICES)

    score = models.FloatField(help_text="Puntaje (>= 0).")
    time = models.FloatField(help_text="Tiempo en segundos (> 0).")

    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ("-timestamp",)
        indexes = [
            models.Index(fields=("sub_event", "participant_id", "round"), name="entry_composite_idx"),
        ]
        verbose_name_plural = "entries"

    def __str__(self) -> str:
        return f"{self.participant_id} · R{self.round} · {self.score} / {self.time}s"
