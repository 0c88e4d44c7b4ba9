from __future__ import annotations

import uuid
from unittest import mock

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase

from compscore.apps.events.models import SubEvent
from compscore.apps.scoring.exceptions import NotFoundError, RemoteIOError
from compscore.apps.scoring.models import Entry
from compscore.apps.scoring.services.entries import (
    create_entry,
    delete_entry,
    replace_entry,
    validate_entry_fields,
)


class ValidateEntryFieldsTest(SimpleTestCase):
    def test_normalizes(self):
        self.assertEqual(
            validate_entry_fields("  1001 ", "8,5", "30", "2", "senior"),
            ("1001", 8.5, 30.0, 2, "senior"),
        )

    def test_each_field_reported(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_entry_fields("", "-1", "0", 3, "kids")
        self.assertEqual(
            set(ctx.exception.message_dict),
            {"participant_id", "score", "time", "round", "group"},
        )

    def test_round_must_be_integral(self):
        self.assertEqual(validate_entry_fields("A", 1, 1, 2.0)[3], 2)
        self.assertEqual(validate_entry_fields("A", 1, 1, " 2 ")[3], 2)
        for bad in (1.9, True, "1.5", None):
            with self.subTest(round=bad):
                with self.assertRaises(ValidationError) as ctx:
                    validate_entry_fields("A", 1, 1, bad)
                self.assertEqual(set(ctx.exception.message_dict), {"round"})

    def test_overflowing_number_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_entry_fields("A", 10 ** 400, 10 ** 400)
        self.assertEqual(set(ctx.exception.message_dict), {"score", "time"})

    def test_zero_score_allowed(self):
        self.assertEqual(validate_entry_fields("A", 0, 1)[1], 0.0)

    def test_non_finite_rejected(self):
        for bad in ("nan", "inf", "abc", None, ""):
            with self.subTest(bad=bad):
                with self.assertRaises(ValidationError) as ctx:
                    validate_entry_fields("A", bad, 10)
                self.assertIn("score", ctx.exception.message_dict)


class EntryServicesTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.sub_event = SubEvent.objects.create(name="Robótica")
        cls.other = SubEvent.objects.create(name="Programación")

    def test_create_fills_name_with_participant_id(self):
        e = create_entry(self.sub_event, participant_id="1001", round=1, score=8, time=30)
        self.assertEqual(e.participant_name, "1001")
        self.assertEqual(e.group, "junior")

    def test_create_replaces_same_key(self):
        first = create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        second = create_entry(self.sub_event, participant_id="1001", round=1, score=7, time=35)
        rows = Entry.objects.filter(sub_event=self.sub_event, participant_id="1001", round=1)
        self.assertEqual(list(rows), [second])
        self.assertFalse(Entry.objects.filter(pk=first.pk).exists())

    def test_create_keeps_other_rounds_and_sub_events(self):
        create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        create_entry(self.sub_event, participant_id="1001", round=2, score=4, time=30)
        create_entry(self.other, participant_id="1001", round=1, score=5, time=30)
        create_entry(self.sub_event, participant_id="1001", round=1, score=6, time=30)
        self.assertEqual(Entry.objects.filter(participant_id="1001").count(), 3)

    def test_create_validation_before_write(self):
        with self.assertRaises(ValidationError):
            create_entry(self.sub_event, participant_id="1001", round=1, score=-1, time=30)
        self.assertFalse(Entry.objects.exists())

    def test_create_unknown_sub_event(self):
        with self.assertRaises(NotFoundError):
            create_entry(uuid.uuid4(), participant_id="1001", round=1, score=1, time=1)

    def test_replace_drops_collision(self):
        r1 = create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        r2 = create_entry(self.sub_event, participant_id="1001", round=2, score=4, time=30)
        updated = replace_entry(r2.pk, participant_id="1001", round=1, score=9, time=20)
        self.assertEqual(updated.pk, r2.pk)
        self.assertEqual(updated.timestamp, r2.timestamp)
        self.assertEqual(list(Entry.objects.filter(sub_event=self.sub_event)), [updated])
        self.assertFalse(Entry.objects.filter(pk=r1.pk).exists())

    def test_replace_unknown(self):
        with self.assertRaises(NotFoundError):
            replace_entry(uuid.uuid4(), participant_id="1001", round=1, score=9, time=20)

    def test_delete(self):
        e = create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
        delete_entry(e.pk)
        self.assertFalse(Entry.objects.exists())
        with self.assertRaises(NotFoundError):
            delete_entry(e.pk)

    def test_database_error_becomes_remote_io(self):
        with mock.patch.object(Entry.objects, "create", side_effect=DatabaseError("caída")):
            with self.assertRaises(RemoteIOError):
                create_entry(self.sub_event, participant_id="1001", round=1, score=3, time=30)
