from django.urls import path
from . import views

# Namespace del app para usar 'judging:...' en {% url %}
app_name = "judging"

urlpatterns = [
    path("", views.console, name="console"),
    path("<uuid:sub_event_id>/entries/add/", views.entry_add, name="entry_add"),
    path("entries/<uuid:entry_id>/edit/", views.entry_edit, name="entry_edit"),
    path("entries/<uuid:entry_id>/delete/", views.entry_delete, name="entry_delete"),
]
