import logging

from django.http import HttpResponseNotFound

from apps.invisible import conf
from apps.invisible.decorators import get_route_profiles
from apps.invisible.gate import VisibilityGate
from apps.invisible.rules import parse_profile_rules, parse_route_rules

logger = logging.getLogger(__name__)


class InvisibleApiMiddleware:
    """Answer 404 for gated endpoints unless the caller sends the right header.

    Rule tables are read once, when Django builds the middleware chain.
    Passing ``configurations`` or ``profiles`` explicitly overrides the
    ``INVISIBLE_API_CONFIGURATIONS`` / ``INVISIBLE_API_PROFILES`` settings.
    """

    def __init__(self, get_response, configurations=None, profiles=None):
        self.get_response = get_response
        route_rules = (
            conf.get_route_rules()
            if configurations is None
            else parse_route_rules(configurations)
        )
        profile_rules = (
            conf.get_profile_rules() if profiles is None else parse_profile_rules(profiles)
        )
        self.gate = VisibilityGate(route_rules, profile_rules)

    def __call__(self, request):
        return self.get_response(request)

    def process_view(self, request, view_func, view_args, view_kwargs):
        # Runs after URL resolution, so the matched view's profiles are known.
        profiles = get_route_profiles(view_func, request)
        # Rules match route paths, without the SCRIPT_NAME mount prefix.
        if self.gate.decide(request.method, request.path_info, request.headers, profiles):
            return None

        logger.debug("Hid %s %s from caller", request.method, request.path_info)
        return HttpResponseNotFound()
