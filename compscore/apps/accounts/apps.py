from django.apps import AppConfig
from django.db.models.signals import post_delete


def delete_referee_user(sender, instance, **kwargs):
    # El User del árbitro se va con su perfil
    from django.contrib.auth.models import User
    User.objects.filter(pk=instance.user_id, is_staff=False, is_superuser=False).delete()


class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'compscore.apps.accounts'
    label = 'accounts'

    def ready(self):
        from .models import RefereeProfile
        post_delete.connect(
            delete_referee_user,
            sender=RefereeProfile,
            dispatch_uid="accounts.delete_referee_user",
        )
