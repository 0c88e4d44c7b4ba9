from __future__ import annotations

import tempfile
from io import StringIO
from pathlib import Path

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from compscore.apps.events.models import SubEvent
from compscore.apps.registration.models import RosterItem
from compscore.apps.registration.services.importer import build_template_workbook


class ImportRosterCommandTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.path = Path(tmp.name) / "nomina.xlsx"
        build_template_workbook(sample_rows=5).save(str(self.path))

    def test_import_by_name(self):
        out = StringIO()
        call_command("import_roster_xlsx", str(self.path), "--sub-event", "Robótica", stdout=out)
        self.assertIn("Importados: 5", out.getvalue())
        self.assertEqual(RosterItem.objects.filter(sub_event=self.sub_event).count(), 5)

    def test_dry_run_writes_nothing(self):
        out = StringIO()
        call_command("import_roster_xlsx", str(self.path), "--sub-event", str(self.sub_event.pk), "--dry-run", stdout=out)
        self.assertIn("Dry-run: 5", out.getvalue())
        self.assertFalse(RosterItem.objects.exists())

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("import_roster_xlsx", "/no/existe.xlsx", "--sub-event", "Robótica")

    def test_unknown_sub_event(self):
        with self.assertRaises(CommandError):
            call_command("import_roster_xlsx", str(self.path), "--sub-event", "Otra")
