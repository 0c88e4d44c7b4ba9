from __future__ import annotations

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from compscore.apps.events.models import SubEvent
from compscore.apps.events.selection import resolve_sub_event
from compscore.apps.registration.services.importer import (
    RosterParseError,
    parse_roster_rows,
    read_table,
    upsert_roster,
)


def _get_sub_event(value: str) -> SubEvent:
    try:
        return resolve_sub_event(value)
    except (SubEvent.DoesNotExist, SubEvent.MultipleObjectsReturned) as exc:
        raise CommandError(str(exc))


class Command(BaseCommand):
    help = "Importa la nómina (código, nombre, grupo) de una prueba desde un .xlsx o .csv."

    def add_arguments(self, parser):
        parser.add_argument("path", type=str, help="Ruta al archivo .xlsx / .csv")
        parser.add_argument("--sub-event", required=True, help="Id o nombre de la prueba destino")
        parser.add_argument("--sheet", type=str, default=None, help="Nombre de la hoja (por defecto: primera)")
        parser.add_argument("--dry-run", action="store_true", help="Simula sin escribir cambios")

    def handle(self, *args, **options):
        path = Path(options["path"])
        dry_run = options.get("dry_run", False)

        if not path.exists():
            raise CommandError(f"Archivo no encontrado: {path}")

        sub_event = _get_sub_event(options["sub_event"])

        try:
            with path.open("rb") as fp:
                rows = read_table(fp, path.name, sheet=options.get("sheet"))
        except RosterParseError as e:
            raise CommandError(f"Importados: 0. {e}")

        items = parse_roster_rows(rows)
        skipped = max(0, len(rows) - 1 - len(items))

        if not items:
            self.stdout.write(self.style.WARNING("Importados: 0 (no hay filas con código)."))
            return

        if dry_run:
            seniors = sum(1 for i in items if i.group == "senior")
            self.stdout.write(self.style.WARNING(
                f"Dry-run: {len(items)} filas válidas ({seniors} senior) · {skipped} descartadas. No se escribió nada."
            ))
            return

        count = upsert_roster(sub_event, items)
        self.stdout.write(self.style.SUCCESS(f"Prueba: {sub_event.name}"))
        self.stdout.write(self.style.SUCCESS(f"Importados: {count}  ·  Descartados: {skipped}"))
