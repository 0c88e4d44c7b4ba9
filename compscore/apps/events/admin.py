from __future__ import annotations

from django.contrib import admin

from .models import Competition, SubEvent


@admin.register(Competition)
class CompetitionAdmin(admin.ModelAdmin):
    list_display = ("name", "award_first", "award_second", "award_third", "updated_at")

    def has_add_permission(self, request):
        # Fila única
        return not Competition.objects.exists()


@admin.register(SubEvent)
class SubEventAdmin(admin.ModelAdmin):
    list_display = ("name", "entries_count", "roster_count", "created_at")
    search_fields = ("name",)

    def entries_count(self, obj: SubEvent) -> int:
        return obj.entries.count()
    entries_count.short_description = "Marcas"

    def roster_count(self, obj: SubEvent) -> int:
        return obj.roster.count()
    roster_count.short_description = "Nómina"
