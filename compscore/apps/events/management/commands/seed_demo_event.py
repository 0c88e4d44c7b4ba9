from __future__ import annotations

import random

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from compscore.apps.accounts.models import RefereeProfile
from compscore.apps.events.models import Competition, SubEvent
from compscore.apps.registration.models import RosterItem
from compscore.apps.scoring.constants import JUNIOR, SENIOR
from compscore.apps.scoring.services.entries import create_entry

DEMO_PASSWORD = "Pass1234!"
FIRST_NAMES = ["Ana", "Bruno", "Carla", "Diego", "Elena", "Facundo", "Gabriela", "Hugo", "Inés", "Julián"]
LAST_NAMES = ["Pérez", "Gómez", "Rodríguez", "Fernández", "López", "Díaz", "Martínez", "Sosa"]


class Command(BaseCommand):
    help = "Crea pruebas DEMO con nómina, marcas de ambas rondas y (opcional) un árbitro por prueba."

    def add_arguments(self, parser):
        parser.add_argument("--name", type=str, default="", help="Nombre de la competencia")
        parser.add_argument("--sub-events", type=str, default="Robótica,Programación")
        parser.add_argument("--participants", type=int, default=12, help="Participantes por prueba")
        parser.add_argument("--seed-scores", action="store_true", help="Carga marcas de ronda 1 y 2")
        parser.add_argument("--create-staff", action="store_true", help="Crea un árbitro por prueba (arbitro1, arbitro2, ...)")
        parser.add_argument("--random-seed", type=int, default=7)

    @transaction.atomic
    def handle(self, *args, **opts):
        names = [n.strip() for n in opts["sub_events"].split(",") if n.strip()]
        if not names:
            raise CommandError("Indique al menos una prueba en --sub-events.")
        participants = opts["participants"]
        if participants < 1:
            raise CommandError("--participants debe ser >= 1")
        rng = random.Random(opts["random_seed"])

        # 1) Competencia
        if opts["name"]:
            comp = Competition.load()
            comp.name = opts["name"]
            comp.save()

        User = get_user_model()
        for idx, name in enumerate(names, start=1):
            # 2) Prueba
            sub_event, created = SubEvent.objects.get_or_create(name=name)
            self.stdout.write(("Creada" if created else "Existente") + f": {sub_event.name}")

            # 3) Nómina
            for n in range(1, participants + 1):
                pid = f"{idx}{n:03d}"
                RosterItem.objects.update_or_create(
                    sub_event=sub_event,
                    participant_id=pid,
                    defaults={
                        "name": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                        "group": SENIOR if n % 2 == 0 else JUNIOR,
                    },
                )

            # 4) Marcas
            if opts["seed_scores"]:
                for item in RosterItem.objects.filter(sub_event=sub_event):
                    for rnd in (1, 2):
                        create_entry(
                            sub_event,
                            participant_id=item.participant_id,
                            participant_name=item.name,
                            group=item.group,
                            round=rnd,
                            score=rng.randint(0, 20) * 5,
                            time=round(rng.uniform(30, 180), 1),
                        )

            # 5) Árbitro
            if opts["create_staff"]:
                username = f"arbitro{idx}"
                user, _ = User.objects.get_or_create(username=username)
                user.set_password(DEMO_PASSWORD)
                user.save()
                RefereeProfile.objects.update_or_create(user=user, defaults={"sub_event": sub_event})
                self.stdout.write(f"  Árbitro: {username} / {DEMO_PASSWORD}")

        self.stdout.write(self.style.SUCCESS(f"Demo lista: {len(names)} prueba(s), {participants} participantes c/u."))
