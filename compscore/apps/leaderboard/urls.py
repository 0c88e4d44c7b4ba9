from django.urls import path
from . import views

app_name = "leaderboard"

urlpatterns = [
    path("<uuid:sub_event_id>/", views.board, name="board"),
    path("<uuid:sub_event_id>/export.csv", views.export_csv, name="export_csv"),
]
