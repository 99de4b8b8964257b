"""
Django settings for ChatViewer.

Only what the transcript app needs to render messages: templates for the
message filters and logging for the rendering pipeline.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "chatviewer-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "transcript",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_TZ = True

# Message rendering (see transcript.markdown.config for the defaults)
CHAT_MARKDOWN = {
    "PROTECT_CODE": True,
    "SANITIZE_OUTPUT": False,
    "PREFORMATTED_CLASS": "pre-wrap",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "transcript": {
            "handlers": ["console"],
            "level": os.environ.get("TRANSCRIPT_LOG_LEVEL", "INFO"),
        },
    },
}
