from __future__ import annotations

from django.contrib import admin

from .models import Entry


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    list_display = ("participant_id", "participant_name", "group", "round", "score", "time", "sub_event", "timestamp")
    list_filter = ("sub_event", "group", "round")
    search_fields = ("participant_id", "participant_name")
    date_hierarchy = "timestamp"
    ordering = ("-timestamp",)
