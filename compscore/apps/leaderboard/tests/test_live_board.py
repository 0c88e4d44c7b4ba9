from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from compscore.apps.events.models import SubEvent
from compscore.apps.scoring.services.entries import create_entry


class LiveBoardCommandTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")
        create_entry(cls.sub_event, participant_id="1001", participant_name="Ana", round=1, score=8, time=30)

    def test_single_iteration_prints_both_groups(self):
        out = StringIO()
        call_command("live_board", "--sub-event", "Robótica", "--iterations", "1", stdout=out)
        text = out.getvalue()
        self.assertIn("Robótica", text)
        self.assertIn("Junior (1)", text)
        self.assertIn("Senior (0)", text)
        self.assertIn("Ana", text)

    def test_sub_event_by_id(self):
        out = StringIO()
        call_command("live_board", "--sub-event", str(self.sub_event.pk), "--iterations", "1", stdout=out)
        self.assertIn("1001", out.getvalue())

    def test_unknown_sub_event(self):
        with self.assertRaises(CommandError):
            call_command("live_board", "--sub-event", "nada", "--iterations", "1", stdout=StringIO())
