from pathlib import Path
import os

# === Paths ===
# base.py está en: <root>/compscore/compscore/settings/base.py
BASE_DIR = Path(__file__).resolve().parents[3]  # <root>

# === Seguridad / Debug ===
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-secret-key-change-me")
DEBUG = os.environ.get("DEBUG", "1") == "1"
ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "127.0.0.1,localhost,testserver").split(",")

# === Apps ===
INSTALLED_APPS = [
    # Django core
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Apps del proyecto
    "compscore.apps.accounts",
    "compscore.apps.events",
    "compscore.apps.judging",
    "compscore.apps.leaderboard",
    "compscore.apps.registration",
    "compscore.apps.scoring",
]

# === Middleware ===
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    # request.auth_session (rol admin / árbitro / anónimo)
    "compscore.apps.accounts.middleware.AuthSessionMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# === URLs raíz del proyecto ===
ROOT_URLCONF = "compscore.compscore.urls"

# === Templates ===
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],  # carpeta templates/ a nivel de proyecto
        "APP_DIRS": True,
        "OPTIONS": {
                "context_processors": [
                    "django.template.context_processors.debug",
                    "django.template.context_processors.request",
                    "django.contrib.auth.context_processors.auth",
                    "django.contrib.messages.context_processors.messages",
                    "compscore.apps.events.context_processors.competition",
                ],
        },
    },
]

# === WSGI ===
WSGI_APPLICATION = "compscore.compscore.wsgi.application"

# === Base de datos (SQLite por defecto) ===
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# === Password validators ===
# Las cuentas de árbitro se crean desde el panel con claves cortas; no se endurece.
AUTH_PASSWORD_VALIDATORS = []

# === i18n / tz ===
LANGUAGE_CODE = "es"
TIME_ZONE = "America/New_York"
USE_I18N = True
USE_TZ = True

# === Static ===
STATIC_URL = "/static/"
STATICFILES_DIRS = [BASE_DIR / "static"]
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# === Auth redirects ===
LOGIN_URL = "login"
LOGIN_REDIRECT_URL = "judging:console"
LOGOUT_REDIRECT_URL = "home"

# === Competencia ===
COMPSCORE_COMPETITION_NAME = os.environ.get("COMPSCORE_COMPETITION_NAME", "Competencia sin nombre")
COMPSCORE_DEFAULT_AWARDS = {"first": 15, "second": 25, "third": 30}
# Segundos entre refrescos de la pantalla pública
COMPSCORE_DISPLAY_REFRESH_SECONDS = int(os.environ.get("COMPSCORE_DISPLAY_REFRESH_SECONDS", "10"))
COMPSCORE_ADMIN_PASSWORD = os.environ.get("COMPSCORE_ADMIN_PASSWORD", "admin")

# === Logging ===
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "compscore": {
            "handlers": ["console"],
            "level": os.environ.get("COMPSCORE_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
