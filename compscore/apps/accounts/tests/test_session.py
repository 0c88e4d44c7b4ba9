from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from compscore.apps.accounts.models import RefereeProfile
from compscore.apps.accounts.session import ADMIN, ANONYMOUS, REFEREE, AuthSession
from compscore.apps.events.models import SubEvent

User = get_user_model()


class AuthSessionTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")
        cls.other = SubEvent.objects.create(name="Programación")
        cls.admin = User.objects.create_user(username="admin", password="admin", is_staff=True)
        cls.referee = User.objects.create_user(username="ref", password="Pass1234!")
        RefereeProfile.objects.create(user=cls.referee, sub_event=cls.sub_event)
        cls.plain = User.objects.create_user(username="nadie", password="Pass1234!")

    def test_anonymous(self):
        s = AuthSession.from_user(AnonymousUser())
        self.assertEqual(s.role, ANONYMOUS)
        self.assertFalse(s.is_authenticated)
        self.assertFalse(s.can_score(self.sub_event))

    def test_admin_scores_everywhere(self):
        s = AuthSession.from_user(self.admin)
        self.assertEqual(s.role, ADMIN)
        self.assertTrue(s.can_score(self.sub_event))
        self.assertTrue(s.can_score(self.other))

    def test_referee_bound_to_sub_event(self):
        s = AuthSession.from_user(User.objects.get(pk=self.referee.pk))
        self.assertEqual(s.role, REFEREE)
        self.assertEqual(s.sub_event_id, self.sub_event.pk)
        self.assertTrue(s.can_score(self.sub_event))
        self.assertTrue(s.can_score(self.sub_event.pk))
        self.assertFalse(s.can_score(self.other))

    def test_user_without_role(self):
        s = AuthSession.from_user(self.plain)
        self.assertFalse(s.is_authenticated)
        self.assertEqual(s.username, "nadie")

    def test_deleting_profile_removes_user(self):
        RefereeProfile.objects.filter(user=self.referee).delete()
        self.assertFalse(User.objects.filter(username="ref").exists())

    def test_deleting_sub_event_removes_referee(self):
        self.sub_event.delete()
        self.assertFalse(User.objects.filter(username="ref").exists())
        self.assertTrue(User.objects.filter(username="admin").exists())
