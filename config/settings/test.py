"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="q3LcV9mXwR1tZp8BnK5hJy2GfD7sAeU0oQiN4vMlHbCxTgWrYjPkSdFaEz6O",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"
# Tests address endpoints under /rest/api/v1/.
HTTP_ROUTE = "rest/"

# DATABASES
# ------------------------------------------------------------------------------
# Use SQLite in-memory for faster tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# INVISIBLE API
# ------------------------------------------------------------------------------
# Tests configure their own tables through the ``settings`` fixture.
INVISIBLE_API_CONFIGURATIONS = []
INVISIBLE_API_PROFILES = []

# LOGGING
# ------------------------------------------------------------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "level": "WARNING",
            "class": "logging.StreamHandler",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
    "root": {"level": "WARNING", "handlers": ["console"]},
}
