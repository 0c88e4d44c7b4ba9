from __future__ import annotations

from django.contrib import admin

from .models import RosterItem


@admin.register(RosterItem)
class RosterItemAdmin(admin.ModelAdmin):
    list_display = ("participant_id", "name", "group", "sub_event")
    list_filter = ("sub_event", "group")
    search_fields = ("participant_id", "name")
    raw_id_fields = ("sub_event",)
