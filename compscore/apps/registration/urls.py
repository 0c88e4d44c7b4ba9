from django.urls import path
from . import views

app_name = "registration"

urlpatterns = [
    path("template.xlsx", views.roster_template, name="roster_template"),
    path("<uuid:sub_event_id>/import/", views.roster_import, name="roster_import"),
]
