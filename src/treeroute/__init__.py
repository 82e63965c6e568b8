"""treeroute — a URL-to-action router built on a routes tree, not regexes.

Static, required (``{name}``) and optional (``{name?}``) segments are
matched in that order at every depth.

Basic usage::

    from treeroute import Router

    router = Router()
    router.add_route("get", "/", "home")
    router.add_route("get", "/user/{id}", "user-id")
    router.add_route("any", "/archive/{year}/{month?}", "archive")

    match = router.find_route("get", "/user/7")
    match.action   # "user-id"
    match.params   # {"id": "7"}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "InvalidMethod",
    "MethodNotAllowed",
    "RouteMatch",
    "RouteNotFound",
    "Router",
    "RouterConfig",
    "TreeRouteError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import treeroute`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from treeroute.routing.router import Router

        return Router

    if name == "RouteMatch":
        from treeroute.routing.route import RouteMatch

        return RouteMatch

    if name == "RouterConfig":
        from treeroute.config import RouterConfig

        return RouterConfig

    if name in (
        "ConfigurationError",
        "HTTPError",
        "InvalidMethod",
        "MethodNotAllowed",
        "RouteNotFound",
        "TreeRouteError",
    ):
        from treeroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
