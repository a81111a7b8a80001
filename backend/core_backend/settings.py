"""
Django settings for the restaurant floor backend.

Values that differ between terminals or deployments are read from the
environment. Restaurant-level values (shop name, currency, report limits)
live in RESTAURANT_FLOOR and are read through core_backend.config.AppSettings.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-floor-development-key-change-me"
)

DEBUG = _env_bool("DJANGO_DEBUG", True)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]


INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    # Local apps
    "core_backend",
    "tables",
    "menu",
    "orders",
    "payments",
    "reports",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core_backend.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

ASGI_APPLICATION = "core_backend.asgi.application"


# Database
# The floor only needs a document-like store; SQLite is the default for a
# single terminal, any Django backend works through the FLOOR_DB_* variables.
DATABASES = {
    "default": {
        "ENGINE": os.environ.get("FLOOR_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("FLOOR_DB_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.environ.get("FLOOR_DB_USER", ""),
        "PASSWORD": os.environ.get("FLOOR_DB_PASSWORD", ""),
        "HOST": os.environ.get("FLOOR_DB_HOST", ""),
        "PORT": os.environ.get("FLOOR_DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


AUTH_PASSWORD_VALIDATORS = []


# Internationalization
LANGUAGE_CODE = "en-us"

# Display timezone: sales are bucketed by day and hour in this zone.
TIME_ZONE = os.environ.get("FLOOR_TIME_ZONE", "Asia/Bangkok")

USE_I18N = True

USE_TZ = True


STATIC_URL = "static/"


REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "core_backend.exceptions.floor_exception_handler",
    "COERCE_DECIMAL_TO_STRING": True,
}


RESTAURANT_FLOOR = {
    "SHOP_NAME": os.environ.get("FLOOR_SHOP_NAME", "Aroi Restaurant"),
    "CURRENCY": os.environ.get("FLOOR_CURRENCY", "THB"),
    "CURRENCY_SYMBOL": os.environ.get("FLOOR_CURRENCY_SYMBOL", "฿"),
    "TOP_SELLING_LIMIT": int(os.environ.get("FLOOR_TOP_SELLING_LIMIT", "10")),
    "RECEIPT_WIDTH": int(os.environ.get("FLOOR_RECEIPT_WIDTH", "30")),
}


LOG_LEVEL = os.environ.get("FLOOR_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "core_backend": {"level": LOG_LEVEL},
        "tables": {"level": LOG_LEVEL},
        "menu": {"level": LOG_LEVEL},
        "orders": {"level": LOG_LEVEL},
        "payments": {"level": LOG_LEVEL},
        "reports": {"level": LOG_LEVEL},
    },
}
