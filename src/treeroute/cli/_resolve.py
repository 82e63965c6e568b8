"""Locate the Router a CLI command should inspect.

``treeroute routes`` and ``treeroute match`` both take an import string
naming a module-level router, e.g. ``myapp.urls:router``.
"""

import importlib

from treeroute.routing.router import Router

DEFAULT_ATTRIBUTE = "router"


def resolve_router(import_string: str) -> Router:
    """Import ``module[:attribute]`` and return the Router it names.

    The attribute defaults to ``router``. A zero-argument callable such as
    ``build_router`` is invoked and must return a Router.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the target
    cannot be imported, and ``TypeError`` when it is not a Router.
    """
    module_path, _, attr_name = import_string.partition(":")
    target = getattr(importlib.import_module(module_path), attr_name or DEFAULT_ATTRIBUTE)

    if isinstance(target, Router):
        return target
    if not callable(target):
        msg = f"Expected a treeroute.Router at {import_string!r}, got {type(target).__name__}"
        raise TypeError(msg)

    try:
        router = target()
    except Exception as exc:
        msg = f"Calling {import_string!r} to build a router failed: {exc}"
        raise TypeError(msg) from exc
    if not isinstance(router, Router):
        msg = f"Calling {import_string!r} returned {type(router).__name__}, not a treeroute.Router"
        raise TypeError(msg)
    return router
