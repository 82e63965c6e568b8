"""treeroute exception hierarchy.

Shared by the Router, the routes tree, and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class TreeRouteError(Exception):
    """Base for all treeroute-specific errors."""


class ConfigurationError(TreeRouteError):
    """Raised when a route registration or router configuration is invalid."""


class InvalidMethod(ConfigurationError):  # noqa: N818
    """A route was registered with a method outside the allowed vocabulary."""

    def __init__(self, method: str, allowed: tuple[str, ...] = ()) -> None:
        self.method = method
        self.allowed = allowed
        msg = f"Method {method!r} is not valid"
        if allowed:
            msg += f". Allowed methods: {', '.join(allowed)}"
        super().__init__(msg)


@dataclass(frozen=True, slots=True)
class HTTPError(TreeRouteError):
    """An error that maps directly to an HTTP status code.

    Raised by ``Router.find_route()``. A host server can turn these
    straight into responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class RouteNotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no branch of the routes tree matches the request path."""

    def __init__(self, path: str, detail: str = "") -> None:
        super().__init__(status=404, detail=detail or f"Route for path {path!r} was not found")
        object.__setattr__(self, "path", path)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — the path matches a route but not for this method.

    Includes an ``Allow`` header listing the bound methods and names the
    rejected method in the detail string.
    """

    def __init__(self, method: str, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = (
            f"Method {method!r} is not allowed for this route. Allowed methods: {allow_value}"
        )
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "allowed", allowed)
