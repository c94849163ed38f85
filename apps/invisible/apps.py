from django.apps import AppConfig


class InvisibleConfig(AppConfig):
    name = "apps.invisible"
    label = "invisible"
    verbose_name = "Invisible API"

    def ready(self):
        from . import checks  # noqa: F401
