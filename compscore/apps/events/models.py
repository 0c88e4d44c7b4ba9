from __future__ import annotations

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator
from django.db import models


class Competition(models.Model):
    """
    Datos generales de la competencia (fila única, pk=1):
    nombre visible y porcentajes de premiación.
    """
    name = models.CharField(max_length=200)
    award_first = models.PositiveSmallIntegerField(
        default=15, validators=[MaxValueValidator(100)], help_text="% del grupo con primer premio."
    )
    award_second = models.PositiveSmallIntegerField(
        default=25, validators=[MaxValueValidator(100)], help_text="% del grupo con segundo premio."
    )
    award_third = models.PositiveSmallIntegerField(
        default=30, validators=[MaxValueValidator(100)], help_text="% del grupo con tercer premio."
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Competencia"
        verbose_name_plural = "Competencia"

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "Competition":
        defaults = settings.COMPSCORE_DEFAULT_AWARDS
        obj, _ = cls.objects.get_or_create(
            pk=1,
            defaults={
                "name": settings.COMPSCORE_COMPETITION_NAME,
                "award_first": defaults["first"],
                "award_second": defaults["second"],
                "award_third": defaults["third"],
            },
        )
        return obj

    def award_config(self):
        from compscore.apps.leaderboard.services.awards import AwardConfig
        return AwardConfig(first=self.award_first, second=self.award_second, third=self.award_third)


class SubEvent(models.Model):
    """
    Prueba (sub-evento) con puntuación independiente.
    Borrarla elimina en cascada sus marcas, su nómina y sus árbitros.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=160)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("created_at", "name")

    def __str__(self) -> str:
        return self.name
