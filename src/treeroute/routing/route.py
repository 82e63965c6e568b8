"""Segment, RawRoute, RouteExec and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


class SegmentKind(Enum):
    """How a path pattern segment matches a request component."""

    STATIC = "static"
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route pattern.

    Static:   ``/users``   (kind=STATIC, name="users")
    Required: ``/{id}``    (kind=REQUIRED, name="id")
    Optional: ``/{id?}``   (kind=OPTIONAL, name="id")
    """

    name: str
    kind: SegmentKind = SegmentKind.STATIC


@dataclass(frozen=True, slots=True)
class RawRoute:
    """One ``add_route()`` call, stored until the routes tree is built."""

    pattern: str
    actions: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))


@dataclass(frozen=True, slots=True)
class RouteExec:
    """Terminal payload of a trie node: the pattern and its method bindings."""

    pattern: str
    actions: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))

    def merge(self, actions: Mapping[str, Any]) -> "RouteExec":
        """Return a copy with *actions* laid over the current bindings.

        The pattern of the first registration is kept.
        """
        return RouteExec(pattern=self.pattern, actions={**self.actions, **actions})


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful ``find_route()``."""

    pattern: str
    method: str
    action: Any
    params: dict[str, str]
