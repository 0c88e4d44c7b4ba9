from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from compscore.apps.events.models import Competition, SubEvent
from compscore.apps.events.selection import resolve_sub_event
from compscore.apps.leaderboard.services.awards import assign_awards, award_label
from compscore.apps.leaderboard.services.export import format_number
from compscore.apps.leaderboard.services.refresh import PeriodicRefresh
from compscore.apps.scoring.constants import GROUP_LABELS, GROUPS
from compscore.apps.scoring.exceptions import RemoteIOError
from compscore.apps.scoring.services.state import ScoreboardState
from compscore.apps.scoring.services.store import OrmStore


class Command(BaseCommand):
    help = "Muestra en la terminal la clasificación de una prueba, refrescando cada N segundos."

    def add_arguments(self, parser):
        parser.add_argument("--sub-event", required=True, help="Id o nombre de la prueba")
        parser.add_argument("--interval", type=float, default=None, help="Segundos entre refrescos (por defecto: COMPSCORE_DISPLAY_REFRESH_SECONDS)")
        parser.add_argument("--iterations", type=int, default=None, help="Cantidad de refrescos y salir (por defecto: hasta Ctrl+C)")

    def handle(self, *args, **options):
        try:
            sub_event = resolve_sub_event(options["sub_event"])
        except (SubEvent.DoesNotExist, SubEvent.MultipleObjectsReturned) as exc:
            raise CommandError(str(exc))

        interval = options["interval"] or settings.COMPSCORE_DISPLAY_REFRESH_SECONDS
        iterations = options["iterations"]
        if iterations is not None and iterations < 1:
            raise CommandError("--iterations debe ser >= 1")

        self.state = ScoreboardState(OrmStore(), sub_event.pk)
        self.sub_event = sub_event
        try:
            self.state.reload()
        except RemoteIOError as exc:
            raise CommandError(str(exc))

        try:
            refresh = PeriodicRefresh(self._render, interval, name="live-board")
        except ValueError as exc:
            raise CommandError(str(exc))

        if iterations is not None:
            # Modo acotado: ciclos síncronos en este hilo
            for i in range(iterations):
                refresh.tick()
                if i < iterations - 1:
                    refresh.wait(interval)
            return

        refresh.start()
        try:
            while not refresh.wait(1):
                pass
        except KeyboardInterrupt:
            self.stdout.write("")
        finally:
            refresh.cancel(timeout=interval)

    def _render(self) -> None:
        try:
            self.state.refresh_entries()
        except RemoteIOError as exc:
            self.stdout.write(self.style.WARNING(f"Sin conexión con la base: {exc}"))
            return

        config = Competition.load().award_config()
        standings = self.state.standings()
        self.stdout.write(self.style.SUCCESS(f"== {self.sub_event.name} =="))
        for group in GROUPS:
            rows = standings.get(group, [])
            self.stdout.write(f"-- {GROUP_LABELS[group]} ({len(rows)}) --")
            if not rows:
                self.stdout.write("  (sin marcas)")
                continue
            for stat, award in zip(rows, assign_awards(rows, config)):
                best = stat.best_entry
                self.stdout.write(
                    f"{stat.rank:>3}. {stat.participant_id:<10} {stat.participant_name:<24} "
                    f"{format_number(best.score):>8} {format_number(best.time):>8}s  {award_label(award, empty='')}"
                )
