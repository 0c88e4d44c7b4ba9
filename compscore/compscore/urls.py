from django.contrib import admin
from django.urls import include, path

from compscore.apps.events import views as event_views
from compscore.apps.judging import api as judging_api
from compscore.apps.leaderboard import views as leaderboard_views
from compscore.apps.registration import views as registration_views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("compscore.apps.accounts.urls")),

    # Home
    path("", event_views.home, name="home"),

    # Configuración del sistema (solo admin)
    path("settings/", include("compscore.apps.events.urls")),

    # Consola de carga (admin / árbitro)
    path("judging/", include("compscore.apps.judging.urls")),

    # Nómina: importación y plantilla
    path("roster/", include("compscore.apps.registration.urls")),

    # Clasificación y exportación
    path("leaderboard/", include("compscore.apps.leaderboard.urls")),

    # Pantalla pública
    path("display/", leaderboard_views.display, name="display"),
    path("display/<uuid:sub_event_id>/", leaderboard_views.display, name="display_sub_event"),

    # API JSON
    path("api/health/", event_views.health, name="api_health"),
    path("api/info/", event_views.api_info, name="api_info"),
    path("api/entries/", judging_api.entries_collection, name="api_entries"),
    path("api/entries/<uuid:entry_id>/", judging_api.entry_detail, name="api_entry_detail"),
    path("api/roster/", registration_views.api_roster, name="api_roster"),
    path("api/standings/<uuid:sub_event_id>/", leaderboard_views.api_standings, name="api_standings"),
]
