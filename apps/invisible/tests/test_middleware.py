from unittest.mock import Mock

import pytest
from django.http import HttpResponse
from django.test import RequestFactory

from apps.invisible.decorators import invisible_api
from apps.invisible.rules import RouteRule
from config.middleware import InvisibleApiMiddleware


@pytest.fixture
def rf():
    return RequestFactory()


def make_view(*profiles):
    calls = Mock(return_value=HttpResponse("ok"))

    def view(request, *args, **kwargs):
        return calls(request, *args, **kwargs)

    view.calls = calls
    return invisible_api(*profiles)(view) if profiles else view


@pytest.fixture
def view():
    return make_view()


def dispatch(middleware, request, view):
    """Mimic Django's handler: process_view first, the view only if it passes."""
    response = middleware.process_view(request, view, (), {})
    if response is None:
        response = view(request)
    return response


def build(configurations=(), profiles=()):
    return InvisibleApiMiddleware(Mock(), configurations=configurations, profiles=profiles)


ROUTE = {"http_verb": "GET", "endpoint": "/foo", "header": "X-Key", "value": "secret"}
BETA = {"name": "beta", "header": "X-Beta", "value": "on"}


class TestNoRules:
    """Middleware without rule tables stays out of the way."""

    def test_hits_endpoint_not_marked_as_invisible(self, rf, view):
        """The view runs exactly once and its response is returned."""
        response = dispatch(build(), rf.get("/foo"), view)

        assert response.status_code == 200
        view.calls.assert_called_once()

    def test_call_forwards_to_next_handler(self, rf):
        """__call__ hands the untouched request to get_response."""
        get_response = Mock(return_value=HttpResponse("ok"))
        middleware = InvisibleApiMiddleware(get_response, configurations=[], profiles=[])
        request = rf.get("/foo")

        response = middleware(request)

        get_response.assert_called_once_with(request)
        assert response is get_response.return_value


class TestRouteRules:
    """Endpoints hidden by (verb, path) rules."""

    def test_hits_endpoint_configured_properly(self, rf, view):
        """Matching header: the view gets the original request."""
        request = rf.get("/foo", HTTP_X_KEY="secret")

        response = dispatch(build([ROUTE]), request, view)

        assert response.status_code != 404
        view.calls.assert_called_once_with(request)

    def test_not_found_if_header_value_does_not_match(self, rf, view):
        response = dispatch(build([ROUTE]), rf.get("/foo", HTTP_X_KEY="wrong"), view)

        assert response.status_code == 404
        view.calls.assert_not_called()

    def test_not_found_if_header_is_missing(self, rf, view):
        """The 404 carries no body that could hint at the endpoint."""
        response = dispatch(build([ROUTE]), rf.get("/foo"), view)

        assert response.status_code == 404
        assert response.content == b""
        view.calls.assert_not_called()

    def test_other_verb_on_same_path_is_visible(self, rf, view):
        response = dispatch(build([ROUTE]), rf.post("/foo"), view)

        assert response.status_code == 200
        view.calls.assert_called_once()

    def test_accepts_rule_instances(self, rf, view):
        rule = RouteRule(**ROUTE)

        response = dispatch(build([rule]), rf.get("/foo", HTTP_X_KEY="secret"), view)

        assert response.status_code == 200

    def test_rules_match_paths_below_the_mount_point(self, rf, view):
        """Under SCRIPT_NAME=/sub, a rule for /foo still hides /sub/foo."""
        request = rf.get("/foo", SCRIPT_NAME="/sub")
        assert request.path == "/sub/foo"

        response = dispatch(build([ROUTE]), request, view)

        assert response.status_code == 404
        view.calls.assert_not_called()

    def test_rules_with_the_mount_prefix_do_not_match(self, rf, view):
        """Endpoints are route paths; the SCRIPT_NAME prefix is not part of them."""
        prefixed = {**ROUTE, "endpoint": "/sub/foo"}

        response = dispatch(build([prefixed]), rf.get("/foo", SCRIPT_NAME="/sub"), view)

        assert response.status_code == 200


class TestProfiles:
    """Endpoints hidden through the profiles attached to the view."""

    def test_not_found_for_tagged_view_without_header(self, rf):
        view = make_view("beta")

        response = dispatch(build(profiles=[BETA]), rf.get("/bar"), view)

        assert response.status_code == 404
        view.calls.assert_not_called()

    def test_hits_tagged_view_with_header(self, rf):
        view = make_view("beta")

        response = dispatch(build(profiles=[BETA]), rf.get("/bar", HTTP_X_BETA="on"), view)

        assert response.status_code == 200
        view.calls.assert_called_once()

    def test_one_of_two_profiles_is_enough(self, rf):
        """A tag without a configured profile does not block the other one."""
        view = make_view("unknown", "beta")

        response = dispatch(build(profiles=[BETA]), rf.get("/bar", HTTP_X_BETA="on"), view)

        assert response.status_code == 200

    def test_tagged_view_without_profile_tables_is_visible(self, rf):
        view = make_view("beta")

        response = dispatch(build(), rf.get("/bar"), view)

        assert response.status_code == 200
        view.calls.assert_called_once()

    def test_route_and_profile_rules_must_both_pass(self, rf):
        """With both kinds of rule applying, each needs its own header."""
        view = make_view("beta")
        route = {**ROUTE, "endpoint": "/bar"}
        middleware = build([route], [BETA])

        assert dispatch(middleware, rf.get("/bar", HTTP_X_KEY="secret"), view).status_code == 404
        assert dispatch(middleware, rf.get("/bar", HTTP_X_BETA="on"), view).status_code == 404
        view.calls.assert_not_called()

        request = rf.get("/bar", HTTP_X_KEY="secret", HTTP_X_BETA="on")
        assert dispatch(middleware, request, view).status_code == 200
        view.calls.assert_called_once_with(request)


class TestSettings:
    """Where the middleware takes its rule tables from."""

    def test_tables_default_to_settings(self, rf, view, settings):
        settings.INVISIBLE_API_CONFIGURATIONS = [ROUTE]
        settings.INVISIBLE_API_PROFILES = [BETA]

        middleware = InvisibleApiMiddleware(Mock())

        assert middleware.gate.route_rules == (RouteRule(**ROUTE),)
        assert len(middleware.gate.profile_rules) == 1
        assert dispatch(middleware, rf.get("/foo"), view).status_code == 404

    def test_explicit_tables_override_settings(self, rf, view, settings):
        """An explicit empty table wins over configured settings."""
        settings.INVISIBLE_API_CONFIGURATIONS = [ROUTE]

        middleware = InvisibleApiMiddleware(Mock(), configurations=[])

        assert dispatch(middleware, rf.get("/foo"), view).status_code == 200

    def test_denial_is_logged_without_header_values(self, rf, view, caplog):
        with caplog.at_level("DEBUG", logger="config.middleware"):
            dispatch(build([ROUTE]), rf.get("/foo", HTTP_X_KEY="wrong"), view)

        assert "GET /foo" in caplog.text
        assert "wrong" not in caplog.text
