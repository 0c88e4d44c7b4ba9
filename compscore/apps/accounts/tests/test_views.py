from __future__ import annotations

from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.exceptions import ValidationError
from django.test import TestCase, override_settings
from django.urls import reverse

from compscore.apps.accounts.models import RefereeProfile
from compscore.apps.accounts.services import create_referee, delete_referee
from compscore.apps.accounts.session import CURRENT_SUB_EVENT_KEY
from compscore.apps.events.models import SubEvent

User = get_user_model()


class LoginLogoutTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")
        cls.referee = User.objects.create_user(username="ref", password="Pass1234!")
        RefereeProfile.objects.create(user=cls.referee, sub_event=cls.sub_event)

    def test_login_page(self):
        r = self.client.get(reverse("login"))
        self.assertEqual(r.status_code, 200)

    def test_referee_login_locks_sub_event(self):
        r = self.client.post(reverse("login"), {"username": "ref", "password": "Pass1234!"})
        self.assertRedirects(r, reverse("judging:console"), fetch_redirect_response=False)
        self.assertEqual(self.client.session[CURRENT_SUB_EVENT_KEY], str(self.sub_event.pk))

    def test_bad_password(self):
        r = self.client.post(reverse("login"), {"username": "ref", "password": "mala"})
        self.assertEqual(r.status_code, 200)
        self.assertNotIn("_auth_user_id", self.client.session)

    def test_logout(self):
        self.client.login(username="ref", password="Pass1234!")
        r = self.client.post(reverse("logout"))
        self.assertRedirects(r, reverse("home"), fetch_redirect_response=False)
        self.assertNotIn("_auth_user_id", self.client.session)

    def test_password_change_requires_login(self):
        r = self.client.get(reverse("password_change"))
        self.assertEqual(r.status_code, 302)

    def test_password_change(self):
        self.client.login(username="ref", password="Pass1234!")
        r = self.client.post(reverse("password_change"), {
            "old_password": "Pass1234!",
            "new_password1": "nueva",
            "new_password2": "nueva",
        })
        self.assertRedirects(r, reverse("password_change_done"), fetch_redirect_response=False)
        self.assertTrue(User.objects.get(username="ref").check_password("nueva"))


class RefereeServicesTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")

    def test_create_and_delete(self):
        profile = create_referee(" juez1 ", "clave", self.sub_event)
        self.assertEqual(profile.user.username, "juez1")
        self.assertTrue(profile.user.check_password("clave"))
        self.assertTrue(delete_referee(profile.pk))
        self.assertFalse(User.objects.filter(username="juez1").exists())
        self.assertFalse(delete_referee(profile.pk))

    def test_duplicate_username(self):
        create_referee("juez1", "clave", self.sub_event)
        with self.assertRaises(ValidationError) as ctx:
            create_referee("juez1", "otra", self.sub_event)
        self.assertEqual(ctx.exception.message_dict["username"], ["El usuario ya existe."])

    def test_missing_fields(self):
        with self.assertRaises(ValidationError) as ctx:
            create_referee("", "", None)
        self.assertEqual(set(ctx.exception.message_dict), {"username", "password", "sub_event"})


class EnsureAdminCommandTest(TestCase):
    @override_settings(COMPSCORE_ADMIN_PASSWORD="admin")
    def test_creates_admin_with_default_password(self):
        out = StringIO()
        call_command("ensure_admin", stdout=out)
        user = User.objects.get(username="admin")
        self.assertTrue(user.is_staff and user.is_superuser)
        self.assertTrue(user.check_password("admin"))
        self.assertIn("creado", out.getvalue())

    def test_existing_password_kept_unless_reset(self):
        User.objects.create_user(username="admin", password="propia")
        call_command("ensure_admin", "--password", "otra", stdout=StringIO())
        self.assertTrue(User.objects.get(username="admin").check_password("propia"))
        call_command("ensure_admin", "--password", "otra", "--reset-password", stdout=StringIO())
        self.assertTrue(User.objects.get(username="admin").check_password("otra"))
