# settings.py
import os
from pathlib import Path

import dj_database_url

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("SECRET_KEY", "unsafe-dev-secret")
DEBUG = os.getenv("DEBUG", "False").lower() == "true"


def _csv_env(name, default):
    raw = os.getenv(name, default)
    return [h.strip() for h in raw.split(",") if h.strip()]


ALLOWED_HOSTS = _csv_env("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

# ---------- DATABASES ----------
# SQLite next to the project unless DATABASE_URL points elsewhere.
DATABASES = {
    "default": dj_database_url.config(
        default=os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
        conn_max_age=600,
    )
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

ROOT_URLCONF = "config.urls"

# ---------- APPS ----------
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "gigs.apps.GigsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

STATIC_URL = "static/"

# ---------- API ----------
# Callers are identified by the X-Actor-Id header; authentication happens upstream.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
}

# ---------- CACHE ----------
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "gigs",
    }
}

# ---------- BOOKING POLICY ----------
# Every key can be overridden with a GIG_BOOKING_<KEY> environment variable.
GIG_BOOKING = {
    "AUTO_CONFIRM_SINGLE_CANDIDATE": os.getenv(
        "GIG_BOOKING_AUTO_CONFIRM_SINGLE_CANDIDATE", "False"
    ).lower() == "true",
    "LATE_CANCELLATION_HOURS": float(os.getenv("GIG_BOOKING_LATE_CANCELLATION_HOURS", "24")),
    "SUSPENSION_DAYS": float(os.getenv("GIG_BOOKING_SUSPENSION_DAYS", "7")),
    # empty disables the frequent-cancellation rule
    "FREQUENT_CANCELLATION_THRESHOLD": os.getenv(
        "GIG_BOOKING_FREQUENT_CANCELLATION_THRESHOLD", "3"
    ),
    "FREQUENT_CANCELLATION_WINDOW_DAYS": float(
        os.getenv("GIG_BOOKING_FREQUENT_CANCELLATION_WINDOW_DAYS", "30")
    ),
    "DEFAULT_SEARCH_RADIUS_KM": float(os.getenv("GIG_BOOKING_DEFAULT_SEARCH_RADIUS_KM", "50")),
    "READ_CACHE_SECONDS": int(os.getenv("GIG_BOOKING_READ_CACHE_SECONDS", "60")),
}

# ---------- LOGGING ----------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[{levelname}] {asctime} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django.request": {"handlers": ["console"], "level": "ERROR", "propagate": False},
        "gigs": {"level": os.getenv("GIGS_LOG_LEVEL", "INFO")},
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
