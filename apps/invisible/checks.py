"""
System checks for the invisible API settings.

Malformed rule tables and swallowed view tags are reported by
``manage.py check`` (and on ``runserver``) instead of surfacing later.
"""
from django.conf import settings
from django.core import checks
from django.core.exceptions import ImproperlyConfigured
from django.urls import URLResolver, get_resolver

from .conf import CONFIGURATIONS_SETTING, MIDDLEWARE_PATH, PROFILES_SETTING
from .decorators import get_route_profiles, tagged_functions
from .rules import parse_profile_rules, parse_route_rules

TABLES = (
    (CONFIGURATIONS_SETTING, parse_route_rules, "invisible.E001"),
    (PROFILES_SETTING, parse_profile_rules, "invisible.E002"),
)


@checks.register(checks.Tags.security)
def check_rule_tables(app_configs, **kwargs):
    errors = []
    for setting_name, parse, error_id in TABLES:
        raw = getattr(settings, setting_name, None)
        if raw is None:
            continue
        if not isinstance(raw, (list, tuple)):
            errors.append(
                checks.Error(
                    f"{setting_name} must be a list or tuple.",
                    obj=setting_name,
                    id="invisible.E003",
                )
            )
            continue
        try:
            parse(raw)
        except ImproperlyConfigured as exc:
            errors.append(
                checks.Error(
                    str(exc),
                    hint=f"Check the entries of {setting_name}.",
                    obj=setting_name,
                    id=error_id,
                )
            )
    return errors


@checks.register(checks.Tags.security)
def check_middleware_installed(app_configs, **kwargs):
    configured = any(getattr(settings, name, None) for name, _, _ in TABLES)
    if not configured or MIDDLEWARE_PATH in settings.MIDDLEWARE:
        return []
    return [
        checks.Warning(
            "Invisible API rules are configured but the middleware is not installed.",
            hint=f"Add '{MIDDLEWARE_PATH}' to MIDDLEWARE.",
            id="invisible.W001",
        )
    ]


@checks.register(checks.Tags.urls)
def check_swallowed_profiles(app_configs, **kwargs):
    warnings = []
    seen = set()
    for callback in _iter_callbacks(get_resolver().url_patterns):
        view_class = getattr(callback, "cls", None)
        if view_class is None or get_route_profiles(callback):
            continue
        key = (view_class.__module__, view_class.__name__)
        if key in seen or key not in tagged_functions:
            continue
        seen.add(key)
        warnings.append(
            checks.Warning(
                f"{'.'.join(key)} is tagged with @invisible_api inside @api_view; "
                "its profiles are ignored.",
                hint="Apply @invisible_api above @api_view.",
                obj=callback,
                id="invisible.W002",
            )
        )
    return warnings


def _iter_callbacks(patterns):
    for pattern in patterns:
        if isinstance(pattern, URLResolver):
            yield from _iter_callbacks(pattern.url_patterns)
        else:
            yield pattern.callback
