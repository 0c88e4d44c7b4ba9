from django.urls import path
from . import views

app_name = "events"

urlpatterns = [
    path("", views.system_settings, name="settings"),
    path("select/", views.select_sub_event, name="select_sub_event"),
    path("sub-events/add/", views.sub_event_create, name="sub_event_create"),
    path("sub-events/<uuid:pk>/rename/", views.sub_event_rename, name="sub_event_rename"),
    path("sub-events/<uuid:pk>/delete/", views.sub_event_delete, name="sub_event_delete"),
    path("referees/add/", views.referee_create, name="referee_create"),
    path("referees/<int:pk>/delete/", views.referee_delete, name="referee_delete"),
]
