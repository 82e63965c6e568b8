"""Tests for treeroute.routing.route — Segment, RawRoute, RouteExec, RouteMatch."""

import pytest

from treeroute.routing.route import RawRoute, RouteExec, RouteMatch, Segment, SegmentKind


class TestSegment:
    def test_static_default(self) -> None:
        seg = Segment(name="users")
        assert seg.kind is SegmentKind.STATIC
        assert seg.name == "users"

    def test_frozen(self) -> None:
        seg = Segment(name="users")
        with pytest.raises(AttributeError):
            seg.name = "other"  # type: ignore[misc]


class TestRawRoute:
    def test_actions_are_read_only(self) -> None:
        raw = RawRoute(pattern="/p", actions={"get": "A"})
        with pytest.raises(TypeError):
            raw.actions["post"] = "B"  # type: ignore[index]

    def test_actions_are_copied(self) -> None:
        actions = {"get": "A"}
        raw = RawRoute(pattern="/p", actions=actions)
        actions["post"] = "B"
        assert dict(raw.actions) == {"get": "A"}


class TestRouteExec:
    def test_merge_overlays_bindings(self) -> None:
        record = RouteExec(pattern="/p", actions={"get": "A", "post": "B"})
        merged = record.merge({"post": "C", "put": "D"})

        assert merged.pattern == "/p"
        assert dict(merged.actions) == {"get": "A", "post": "C", "put": "D"}
        assert dict(record.actions) == {"get": "A", "post": "B"}


class TestRouteMatch:
    def test_creation(self) -> None:
        match = RouteMatch(pattern="/users/{id}", method="get", action="user", params={"id": "42"})
        assert match.action == "user"
        assert match.params == {"id": "42"}

    def test_frozen(self) -> None:
        match = RouteMatch(pattern="/", method="get", action="home", params={})
        with pytest.raises(AttributeError):
            match.action = "other"  # type: ignore[misc]
