from django.contrib import admin
from .models import RefereeProfile

@admin.register(RefereeProfile)
class RefereeProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "sub_event", "created_at")
    list_filter = ("sub_event",)
    search_fields = ("user__username",)
    raw_id_fields = ("user", "sub_event")
