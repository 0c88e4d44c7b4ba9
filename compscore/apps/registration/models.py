from __future__ import annotations

from django.db import models

from compscore.apps.scoring.constants import GROUP_CHOICES, JUNIOR


class RosterItem(models.Model):
    """
    Participante inscripto en una prueba.
    Nombre y grupo de la nómina mandan sobre lo que venga en la marca.
    """
    sub_event = models.ForeignKey(
        "events.SubEvent",
        on_delete=models.CASCADE,
        related_name="roster",
    )
    participant_id = models.CharField(max_length=64)
    name = models.CharField(max_length=160, blank=True, default="")
    group = models.CharField(max_length=8, choices=GROUP_CHOICES, default=JUNIOR)

    class Meta:
        unique_together = (("sub_event", "participant_id"),)
        ordering = ("sub_event", "participant_id")

    def __str__(self) -> str:
        return f"{self.participant_id} · {self.name or '-'}"
