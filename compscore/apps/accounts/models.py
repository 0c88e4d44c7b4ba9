from django.db import models
from django.contrib.auth.models import User


class RefereeProfile(models.Model):
    """
    Cuenta de árbitro: un User atado a una única prueba.
    Al borrarse el perfil (o la prueba) se borra también el User.
    """
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="referee_profile")
    sub_event = models.ForeignKey(
        "events.SubEvent",
        on_delete=models.CASCADE,
        related_name="referees",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("sub_event", "user__username")

    def __str__(self):
        return f"{self.user.username} · {self.sub_event}"
