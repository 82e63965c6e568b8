"""Path normalization and segment classification.

Patterns and request paths go through the same normalization, so
``/user/``, ``user`` and ``/user`` all resolve identically.
"""

from treeroute.routing.route import Segment, SegmentKind

ROOT_SEGMENT = Segment("/")

_OPTIONAL_CLOSE = "?}"
_REQUIRED_CLOSE = "}"


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty components.

    Examples::

        "/"            -> []
        "/users/"      -> ["users"]
        "users//{id}"  -> ["users", "{id}"]
    """
    if not path.startswith("/"):
        path = "/" + path
    if path.endswith("/"):
        path = path[:-1]
    # The first element is always "" (the root); empty gaps from "//" are dropped
    return [part for part in path.split("/")[1:] if part]


def classify_segment(part: str) -> Segment:
    """Classify a single pattern component.

    The first character is taken as the opening marker; the name runs up
    to the closing ``?}`` or ``}``.
    """
    if _OPTIONAL_CLOSE in part:
        return Segment(part[1:].split(_OPTIONAL_CLOSE, 1)[0], SegmentKind.OPTIONAL)
    if _REQUIRED_CLOSE in part:
        return Segment(part[1:].split(_REQUIRED_CLOSE, 1)[0], SegmentKind.REQUIRED)
    return Segment(part)


def parse_path(path: str) -> list[Segment]:
    """Parse a route pattern into segments, root anchor first.

    Examples::

        "/"                 -> [Segment("/")]
        "/users/{id}"       -> [Segment("/"), Segment("users"), Segment("id", REQUIRED)]
        "/a/{x}/{y?}"       -> [Segment("/"), Segment("a"), Segment("x", REQUIRED),
                                Segment("y", OPTIONAL)]
    """
    return [ROOT_SEGMENT, *(classify_segment(part) for part in split_path(path))]
