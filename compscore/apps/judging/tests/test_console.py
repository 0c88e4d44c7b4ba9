from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from compscore.apps.accounts.models import RefereeProfile
from compscore.apps.events.models import SubEvent
from compscore.apps.registration.models import RosterItem
from compscore.apps.scoring.models import Entry
from compscore.apps.scoring.services.entries import create_entry

User = get_user_model()


class ConsoleTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")
        cls.other = SubEvent.objects.create(name="Programación")
        cls.admin = User.objects.create_user(username="admin", password="admin", is_staff=True)
        cls.referee = User.objects.create_user(username="ref", password="Pass1234!")
        RefereeProfile.objects.create(user=cls.referee, sub_event=cls.sub_event)
        cls.plain = User.objects.create_user(username="nadie", password="Pass1234!")
        RosterItem.objects.create(sub_event=cls.sub_event, participant_id="1001", name="Ana", group="senior")

    def login_referee(self):
        self.client.login(username="ref", password="Pass1234!")

    def add(self, sub_event=None, **data):
        payload = {"participant_id": "1001", "group": "junior", "round": "1", "score": "8", "time": "30"}
        payload.update(data)
        return self.client.post(reverse("judging:entry_add", args=[(sub_event or self.sub_event).pk]), payload)

    def test_anonymous_redirected_to_login(self):
        r = self.client.get(reverse("judging:console"))
        self.assertEqual(r.status_code, 302)
        self.assertIn(reverse("login"), r["Location"])

    def test_user_without_role_forbidden(self):
        self.client.login(username="nadie", password="Pass1234!")
        self.assertEqual(self.client.get(reverse("judging:console")).status_code, 403)

    def test_referee_sees_own_sub_event(self):
        self.login_referee()
        r = self.client.get(reverse("judging:console"), {"sub_event": str(self.other.pk)})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.context["sub_event"], self.sub_event)
        self.assertEqual(r.context["roster_count"], 1)

    def test_admin_can_switch_sub_event(self):
        self.client.login(username="admin", password="admin")
        r = self.client.get(reverse("judging:console"), {"sub_event": str(self.other.pk)})
        self.assertEqual(r.context["sub_event"], self.other)
        self.assertEqual(len(r.context["sub_events"]), 2)

    def test_add_fills_identity_from_roster(self):
        self.login_referee()
        r = self.add(group="junior")
        self.assertRedirects(r, reverse("judging:console"), fetch_redirect_response=False)
        entry = Entry.objects.get()
        self.assertEqual((entry.participant_name, entry.group), ("Ana", "senior"))

    def test_add_unknown_participant_uses_code_as_name(self):
        self.login_referee()
        self.add(participant_id="9999", score="7,5")
        entry = Entry.objects.get()
        self.assertEqual(entry.participant_name, "9999")
        self.assertEqual(entry.score, 7.5)

    def test_add_invalid_shows_errors(self):
        self.login_referee()
        r = self.add(participant_id="", time="0")
        self.assertEqual(r.status_code, 400)
        self.assertIn("participant_id", r.context["form"].errors)
        self.assertIn("time", r.context["form"].errors)
        self.assertFalse(Entry.objects.exists())

    def test_resubmission_replaces(self):
        self.login_referee()
        self.add(score="3")
        self.add(score="9")
        self.assertEqual(list(Entry.objects.values_list("score", flat=True)), [9.0])

    def test_referee_cannot_add_to_other_sub_event(self):
        self.login_referee()
        r = self.add(sub_event=self.other)
        self.assertEqual(r.status_code, 403)
        self.assertFalse(Entry.objects.exists())

    def test_edit_flow(self):
        self.login_referee()
        entry = create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        url = reverse("judging:entry_edit", args=[entry.pk])

        r = self.client.get(url)
        self.assertEqual(r.context["editing"], entry)
        self.assertEqual(r.context["form"].initial["score"], 3.0)

        r = self.client.post(url, {"participant_id": "1001", "group": "senior", "round": "2", "score": "6", "time": "25"})
        self.assertRedirects(r, reverse("judging:console"), fetch_redirect_response=False)
        entry.refresh_from_db()
        self.assertEqual((entry.round, entry.score, entry.time), (2, 6.0, 25.0))

    def test_edit_cancel(self):
        self.login_referee()
        entry = create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        r = self.client.post(reverse("judging:entry_edit", args=[entry.pk]), {"cancel": "1"})
        self.assertRedirects(r, reverse("judging:console"), fetch_redirect_response=False)
        entry.refresh_from_db()
        self.assertEqual(entry.score, 3.0)

    def test_delete(self):
        self.login_referee()
        entry = create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        self.client.post(reverse("judging:entry_delete", args=[entry.pk]))
        self.assertFalse(Entry.objects.exists())

    def test_referee_cannot_delete_other_sub_event_entry(self):
        self.login_referee()
        entry = create_entry(self.other, participant_id="1001", round=1, score=3, time=30)
        r = self.client.post(reverse("judging:entry_delete", args=[entry.pk]))
        self.assertEqual(r.status_code, 403)
        self.assertTrue(Entry.objects.exists())

    def test_edit_fills_identity_from_roster(self):
        self.login_referee()
        entry = create_entry(self.sub_event, participant_id="9999", participant_name="Otro", round=1, score=3, time=30)
        r = self.client.post(reverse("judging:entry_edit", args=[entry.pk]), {
            "participant_id": "1001", "participant_name": "", "group": "junior", "round": "1", "score": "6", "time": "25",
        })
        self.assertRedirects(r, reverse("judging:console"), fetch_redirect_response=False)
        entry.refresh_from_db()
        self.assertEqual((entry.participant_id, entry.participant_name, entry.group), ("1001", "Ana", "senior"))
