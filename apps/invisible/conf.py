from django.conf import settings

from .rules import parse_profile_rules, parse_route_rules

CONFIGURATIONS_SETTING = "INVISIBLE_API_CONFIGURATIONS"
PROFILES_SETTING = "INVISIBLE_API_PROFILES"
MIDDLEWARE_PATH = "config.middleware.InvisibleApiMiddleware"


def get_route_rules():
    return parse_route_rules(getattr(settings, CONFIGURATIONS_SETTING, None))


def get_profile_rules():
    return parse_profile_rules(getattr(settings, PROFILES_SETTING, None))
