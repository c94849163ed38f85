from .base import *  # noqa: F403
from .base import HTTP_ROUTE
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = env.bool("DJANGO_DEBUG", default=True)
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="Zq5c1pV8o3LrW2nGk7TfYb0aHs4MdJe9XuRiQy6NwCtKvBgPlAxSmOhDjIzE",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = env.list(
    "DJANGO_ALLOWED_HOSTS",
    default=["localhost", "0.0.0.0", "127.0.0.1"],
)  # noqa: S104

# CACHES
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#caches
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "",
    },
}

# INVISIBLE API
# ------------------------------------------------------------------------------
# Sample tables for trying the catalog endpoints; override through the env.
# Route rules match one verb exactly. DRF also serves HEAD from the GET
# handler, so a hidden GET endpoint needs a paired HEAD rule.
INVISIBLE_API_CONFIGURATIONS = env.json(
    "INVISIBLE_API_CONFIGURATIONS",
    default=[
        {
            "http_verb": verb,
            "endpoint": f"/{HTTP_ROUTE}api/v1/catalog/releases/",
            "header": "X-Release-Key",
            "value": "local-release-key",
        }
        for verb in ("GET", "HEAD")
    ],
)
INVISIBLE_API_PROFILES = env.json(
    "INVISIBLE_API_PROFILES",
    default=[
        {"name": "beta", "header": "X-Beta", "value": "on"},
        {"name": "internal", "header": "X-Internal-Token", "value": "local-internal"},
    ],
)

# LOGGING OVERRIDE FOR LOCAL DEVELOPMENT
# ------------------------------------------------------------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": True,
        },
        "apps": {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
        "config.middleware": {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}
