"""Routes tree — construction, traversal and transfer.

The tree is folded from the raw routes exactly once. After that it is
only read, or replaced wholesale by ``load_tree()``.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from treeroute.routing.paths import parse_path
from treeroute.routing.route import RawRoute, RouteExec, SegmentKind


class TrieNode:
    """A node in the routes tree. Mutable during build only."""

    __slots__ = ("children", "exec_record", "name", "optional_child", "required_child")

    def __init__(self, name: str | None = None) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, TrieNode] = {}
        # Single required-parameter child ({id})
        self.required_child: TrieNode | None = None
        # Single optional-parameter child ({id?})
        self.optional_child: TrieNode | None = None
        # Parameter name bound when this node is entered through a param edge
        self.name = name
        # Set only when a registered pattern ends here
        self.exec_record: RouteExec | None = None

    def __repr__(self) -> str:
        return f"TrieNode(name={self.name!r}, exec_record={self.exec_record!r})"


def build_tree(raw_routes: Iterable[RawRoute]) -> TrieNode:
    """Fold raw routes, in registration order, into a routes tree.

    Registering a pattern that ends on an existing node merges the method
    bindings; later bindings win on conflicts.
    """
    root = TrieNode()
    for raw in raw_routes:
        node = root
        # The root anchor has no edge to follow
        segments = parse_path(raw.pattern)[1:]
        for seg in segments:
            if seg.kind is SegmentKind.REQUIRED:
                if node.required_child is None:
                    node.required_child = TrieNode(seg.name)
                node = node.required_child
            elif seg.kind is SegmentKind.OPTIONAL:
                if node.optional_child is None:
                    node.optional_child = TrieNode(seg.name)
                node = node.optional_child
            else:
                if seg.name not in node.children:
                    node.children[seg.name] = TrieNode(seg.name)
                node = node.children[seg.name]

        if node.exec_record is not None:
            node.exec_record = node.exec_record.merge(raw.actions)
        else:
            node.exec_record = RouteExec(pattern=raw.pattern, actions=raw.actions)

        if segments:
            node.name = segments[-1].name
    return root


def iter_exec_records(node: TrieNode) -> Iterator[RouteExec]:
    """Yield every exec record depth-first.

    Static children come first in insertion order, then the required
    child, then the optional child.
    """
    if node.exec_record is not None:
        yield node.exec_record
    for child in node.children.values():
        yield from iter_exec_records(child)
    if node.required_child is not None:
        yield from iter_exec_records(node.required_child)
    if node.optional_child is not None:
        yield from iter_exec_records(node.optional_child)


def dump_tree(node: TrieNode) -> dict[str, Any]:
    """Convert a routes tree into plain nested dicts.

    Static children sit under their own ``"static"`` key, so a literal
    segment can never collide with a structural key.
    """
    data: dict[str, Any] = {"name": node.name}
    if node.children:
        data["static"] = {text: dump_tree(child) for text, child in node.children.items()}
    if node.required_child is not None:
        data["required"] = dump_tree(node.required_child)
    if node.optional_child is not None:
        data["optional"] = dump_tree(node.optional_child)
    if node.exec_record is not None:
        data["exec"] = {
            "pattern": node.exec_record.pattern,
            "actions": dict(node.exec_record.actions),
        }
    return data


def load_tree(data: dict[str, Any]) -> TrieNode:
    """Rebuild a routes tree from ``dump_tree()`` output.

    The structure is trusted as-is; nothing is validated.
    """
    node = TrieNode(data.get("name"))
    for text, child in data.get("static", {}).items():
        node.children[text] = load_tree(child)
    if "required" in data:
        node.required_child = load_tree(data["required"])
    if "optional" in data:
        node.optional_child = load_tree(data["optional"])
    if "exec" in data:
        node.exec_record = RouteExec(
            pattern=data["exec"]["pattern"],
            actions=data["exec"]["actions"],
        )
    return node
