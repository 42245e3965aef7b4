"""Settings for the slot grid host project.

Values are read from the environment through django-environ.
"""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
)

SECRET_KEY = env("SECRET_KEY")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env("ALLOWED_HOSTS")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "crispy_forms",
    "django_slotgrid",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "slotgrid_site.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django_slotgrid.utils.context_processors.slotgrid",
            ],
        },
    },
]

DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

USE_TZ = True
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Slot grid breakpoints (inclusive upper bounds, px)
SLOTGRID_MOBILE_MAX_PX = env.int("SLOTGRID_MOBILE_MAX_PX", default=600)
SLOTGRID_NARROW_MAX_PX = env.int("SLOTGRID_NARROW_MAX_PX", default=800)
SLOTGRID_MID_MAX_PX = env.int("SLOTGRID_MID_MAX_PX", default=1000)
SLOTGRID_CSS_PREFIX = env("SLOTGRID_CSS_PREFIX", default="slot")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django_slotgrid": {
            "handlers": ["console"],
            "level": env("SLOTGRID_LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
    },
}
