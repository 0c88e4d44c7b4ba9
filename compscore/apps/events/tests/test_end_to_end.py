from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import Client, TestCase

from compscore.apps.events.models import SubEvent
from compscore.apps.registration.models import RosterItem
from compscore.apps.scoring.models import Entry


class EndToEndTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        call_command(
            "seed_demo_event", "--name", "Copa Demo", "--sub-events", "Robótica,Programación",
            "--participants", "6", "--seed-scores", "--create-staff", stdout=StringIO(),
        )

    def setUp(self):
        self.client = Client()
        self.sub_event = SubEvent.objects.get(name="Robótica")

    def test_seeded_data(self):
        self.assertEqual(RosterItem.objects.filter(sub_event=self.sub_event).count(), 6)
        self.assertEqual(Entry.objects.filter(sub_event=self.sub_event).count(), 12)

    def test_public_pages(self):
        for url in ("/", "/display/", f"/display/{self.sub_event.pk}/", f"/leaderboard/{self.sub_event.pk}/"):
            r = self.client.get(url, follow=True)
            self.assertLess(r.status_code, 400, url)
        self.assertContains(self.client.get("/"), "Copa Demo")

    def test_judging_protected(self):
        r = self.client.get("/judging/")
        self.assertEqual(r.status_code, 302)

        self.client.login(username="arbitro1", password="Pass1234!")
        r = self.client.get("/judging/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.context["sub_event"], self.sub_event)
        self.assertEqual(len(r.context["entries"]), 12)

        r = self.client.get(f"/leaderboard/{self.sub_event.pk}/export.csv?group=all")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.content.decode("utf-8").splitlines()), 7)

    def test_seed_is_idempotent(self):
        call_command("seed_demo_event", "--sub-events", "Robótica", "--participants", "6", stdout=StringIO())
        self.assertEqual(SubEvent.objects.filter(name="Robótica").count(), 1)
        self.assertEqual(RosterItem.objects.filter(sub_event=self.sub_event).count(), 6)
