"""
Rule tables consumed by the visibility gate.

Raw tables come from settings or environment JSON as lists of dicts; they are
validated once at startup and frozen into tuples of dataclasses.
"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from django.core.exceptions import ImproperlyConfigured

from .serializers import ProfileRuleSerializer, RouteRuleSerializer


@dataclass(frozen=True)
class RouteRule:
    """A (verb, endpoint) pair reachable only with ``header: value``."""

    http_verb: str
    endpoint: str
    header: str
    value: str

    def matches(self, method: str, path: str) -> bool:
        return self.endpoint == path and self.http_verb == (method or "").upper()


@dataclass(frozen=True)
class ProfileRule:
    """A named header requirement referenced by views through their profiles."""

    name: str
    header: str
    value: str


def parse_route_rules(raw) -> tuple[RouteRule, ...]:
    return _parse_table(raw, RouteRuleSerializer, RouteRule, "route rule")


def parse_profile_rules(raw) -> tuple[ProfileRule, ...]:
    return _parse_table(raw, ProfileRuleSerializer, ProfileRule, "profile rule")


def _parse_table(raw, serializer_class, rule_class, label):
    if raw is None:
        return ()
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        raise ImproperlyConfigured(
            f"The {label} table must be a list, got {type(raw).__name__}."
        )

    rules = []
    for index, entry in enumerate(raw):
        if isinstance(entry, rule_class):
            rules.append(entry)
            continue
        serializer = serializer_class(data=entry)
        if not serializer.is_valid():
            raise ImproperlyConfigured(
                f"Invalid {label} at index {index}: {_format_errors(serializer.errors)}"
            )
        rules.append(rule_class(**serializer.validated_data))
    return tuple(rules)


def _format_errors(errors) -> str:
    return "; ".join(
        f"{field}: {' '.join(str(message) for message in messages)}"
        for field, messages in errors.items()
    )
