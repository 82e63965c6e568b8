"""Tests for treeroute.routing.paths — normalization and segment classification."""

import pytest

from treeroute.routing.paths import ROOT_SEGMENT, classify_segment, parse_path, split_path
from treeroute.routing.route import Segment, SegmentKind


class TestSplitPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", []),
            ("", []),
            ("/users", ["users"]),
            ("users", ["users"]),
            ("/users/", ["users"]),
            ("/api/v2/users", ["api", "v2", "users"]),
            ("//a///b", ["a", "b"]),
        ],
    )
    def test_split(self, path: str, expected: list[str]) -> None:
        assert split_path(path) == expected

    def test_only_one_trailing_slash_is_dropped(self) -> None:
        # The remaining empty element is skipped anyway
        assert split_path("/users//") == ["users"]


class TestClassifySegment:
    def test_static(self) -> None:
        seg = classify_segment("users")
        assert seg == Segment("users", SegmentKind.STATIC)

    def test_required(self) -> None:
        seg = classify_segment("{id}")
        assert seg.kind is SegmentKind.REQUIRED
        assert seg.name == "id"

    def test_optional(self) -> None:
        seg = classify_segment("{id?}")
        assert seg.kind is SegmentKind.OPTIONAL
        assert seg.name == "id"

    def test_text_after_marker_is_dropped(self) -> None:
        assert classify_segment("{id}.json") == Segment("id", SegmentKind.REQUIRED)


class TestParsePath:
    def test_root(self) -> None:
        assert parse_path("/") == [ROOT_SEGMENT]

    def test_root_anchor_first(self) -> None:
        segments = parse_path("/users/{id}/{tab?}")
        assert segments == [
            ROOT_SEGMENT,
            Segment("users"),
            Segment("id", SegmentKind.REQUIRED),
            Segment("tab", SegmentKind.OPTIONAL),
        ]

    def test_trailing_slash_insignificant(self) -> None:
        assert parse_path("/user/") == parse_path("/user") == parse_path("user")
