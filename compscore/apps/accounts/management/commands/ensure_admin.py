from __future__ import annotations

from django.conf import settings
from django.contrib.auth.models import User
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Crea (o repara) la cuenta de administrador de la competencia."

    def add_arguments(self, parser):
        parser.add_argument("--username", default="admin")
        parser.add_argument("--password", default=None, help="Por defecto: COMPSCORE_ADMIN_PASSWORD")
        parser.add_argument("--reset-password", action="store_true", help="Sobrescribe la clave si ya existe")

    def handle(self, *args, **opts):
        username = opts["username"]
        password = opts["password"] or settings.COMPSCORE_ADMIN_PASSWORD

        user, created = User.objects.get_or_create(username=username)
        if created or opts["reset_password"]:
            user.set_password(password)
        user.is_staff = True
        user.is_superuser = True
        user.is_active = True
        user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"✓ Administrador '{username}' creado"))
        else:
            self.stdout.write(self.style.SUCCESS(f"✓ Administrador '{username}' actualizado"))
