"""
Django settings for the retail project.

Values that differ between deployments are read from the environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-local-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h]

INSTALLED_APPS = [
    "components",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "retail.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "UTC")

# Reverse-proxy mount prefix, exposed to views as SCRIPT_NAME
FORCE_SCRIPT_NAME = os.environ.get("DJANGO_SCRIPT_NAME") or None

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "components": {
            "handlers": ["console"],
            "level": os.environ.get("RETAIL_LOG_LEVEL", "INFO"),
        },
    },
}

# ==================== Components ====================

RETAIL_DEFAULT_RENDER_MODE = os.environ.get("RETAIL_DEFAULT_RENDER_MODE", "publish")

RETAIL_CONTENT = {
    "/content/we-retail/us/en": {
        "properties": {"jcr:title": "We.Retail"},
    },
    "/content/we-retail/us/en/jcr:content/hero_image": {
        "properties": {
            "fileReference": "/content/dam/we-retail/en/activities/running/running-woman.jpg",
            "useFullWidth": "true",
            "jcr:lastModified": "2023-11-14T22:13:20+00:00",
        },
    },
    "/content/dam/we-retail/en/activities/running/running-woman.jpg": {
        "metadata": {
            "dam:MIMEtype": "image/jpeg",
            "dc:title": "Running Woman",
        },
    },
}
