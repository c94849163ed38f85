"""
Profile metadata for views.

``@invisible_api("beta")`` tags a view with profile names; the middleware
reads them back through ``get_route_profiles`` once URL resolution has picked
the view. Works on function views, Django class-based views, DRF APIViews
and individual viewset actions.

Put the decorator outside ``@api_view``, which builds a new view function::

    @invisible_api("beta")
    @api_view(["GET"])
    def beta_features(request):
        ...

The other order loses the profiles; ``manage.py check`` reports it as
``invisible.W002``.
"""
import inspect

PROFILES_ATTR = "invisible_api_profiles"

# (module, name) of plain functions tagged directly, used to spot tags
# swallowed by an outer @api_view.
tagged_functions = set()


def invisible_api(*profiles):
    """Attach profile names to a view, view class or viewset action.

    ``@invisible_api`` without arguments marks the view but gates nothing.
    """
    if len(profiles) == 1 and callable(profiles[0]):
        return invisible_api()(profiles[0])

    for name in profiles:
        if not isinstance(name, str) or not name:
            raise TypeError(f"Profile names must be non-empty strings, got {name!r}.")

    def decorator(view):
        setattr(view, PROFILES_ATTR, tuple(profiles))
        if inspect.isfunction(view) and not _is_view_callable(view):
            tagged_functions.add((view.__module__, view.__name__))
        return view

    return decorator


def get_route_profiles(view_func, request=None) -> tuple[str, ...]:
    """Return the profile names attached to a resolved view, in order.

    For viewsets the action dispatched for the request's method contributes
    its profiles. When no action serves that method (OPTIONS, or no request
    at all) every action of the route contributes, so the route stays hidden.
    """
    names = list(getattr(view_func, PROFILES_ATTR, ()))

    # Django's as_view() exposes view_class, DRF's exposes cls.
    view_class = getattr(view_func, "view_class", None) or getattr(view_func, "cls", None)
    if view_class is not None:
        names.extend(getattr(view_class, PROFILES_ATTR, ()))

        actions = getattr(view_func, "actions", None)
        if actions:
            action_name = None
            if request is not None:
                action_name = actions.get((request.method or "").lower())
            action_names = [action_name] if action_name else actions.values()
            for name in action_names:
                handler = getattr(view_class, name, None)
                names.extend(getattr(handler, PROFILES_ATTR, ()))

    return tuple(dict.fromkeys(names))


def _is_view_callable(view):
    return hasattr(view, "view_class") or hasattr(view, "cls")
