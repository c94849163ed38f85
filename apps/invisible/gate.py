"""
Visibility gate: decides whether a request may see the endpoint it targets.

Two independent checks run per request:

* route rules gate a (method, path) pair;
* profile rules gate every view tagged with a matching profile name.

A check only fails when at least one rule applies and none of the applicable
rules finds its header with the exact expected value. Absent tables, headers
or profile names never raise; they simply leave the request ungated.
"""
from collections.abc import Iterable, Mapping

from django.utils.datastructures import CaseInsensitiveMapping

from .rules import ProfileRule, RouteRule


class VisibilityGate:
    __slots__ = ("route_rules", "profile_rules")

    def __init__(
        self,
        route_rules: Iterable[RouteRule] | None = None,
        profile_rules: Iterable[ProfileRule] | None = None,
    ):
        self.route_rules = tuple(route_rules or ())
        self.profile_rules = tuple(profile_rules or ())

    def decide(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str] | None,
        profile_names: Iterable[str] | None = (),
    ) -> bool:
        """Return True when the request is allowed through."""
        headers = _as_header_map(headers)
        if self.failed_route_match(method, path, headers):
            return False
        return not self.failed_profile_match(profile_names, headers)

    def failed_route_match(self, method, path, headers) -> bool:
        headers = _as_header_map(headers)
        has_matching_rule = False
        for rule in self.route_rules:
            if not rule.matches(method, path):
                continue
            has_matching_rule = True
            if headers.get(rule.header) == rule.value:
                return False
        return has_matching_rule

    def failed_profile_match(self, profile_names, headers) -> bool:
        if not profile_names or not self.profile_rules:
            return False

        headers = _as_header_map(headers)
        has_matching_profile = False
        for profile_name in profile_names:
            for profile in self.profile_rules:
                if profile.name != profile_name:
                    continue
                has_matching_profile = True
                if headers.get(profile.header) == profile.value:
                    return False
        return has_matching_profile


def _as_header_map(headers):
    # Django's request.headers is already case-insensitive on names.
    if isinstance(headers, CaseInsensitiveMapping):
        return headers
    return CaseInsensitiveMapping(headers or {})
