"""Router with trie-based path matching and no regular expressions.

Routes are registered while the router is unbuilt and compiled into a
routes tree by ``build()``. Lookups cost O(path depth), independent of
the number of registered routes.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from treeroute.config import RouterConfig
from treeroute.errors import ConfigurationError, InvalidMethod, MethodNotAllowed, RouteNotFound
from treeroute.routing.paths import split_path
from treeroute.routing.route import RawRoute, RouteExec, RouteMatch
from treeroute.routing.tree import TrieNode, build_tree, dump_tree, iter_exec_records, load_tree

__all__ = ["Router"]

logger = logging.getLogger("treeroute.routing")

_A = TypeVar("_A")


class Router:
    """Two-phase router: unbuilt (accepts routes), then built (serves lookups).

    Usage::

        router = Router()
        router.add_route("get", "/users/{id}", "user-detail")
        router.add_route(["get", "post"], "/posts/{slug?}", "posts")
        router.build()
        match = router.find_route("get", "/users/42")
        match.action   # "user-detail"
        match.params   # {"id": "42"}
    """

    __slots__ = ("_config", "_raw_routes", "_root")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._raw_routes: list[RawRoute] = []
        self._root: TrieNode | None = None

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def is_built(self) -> bool:
        return self._root is not None

    @property
    def raw_routes(self) -> tuple[RawRoute, ...]:
        return tuple(self._raw_routes)

    @property
    def routes(self) -> list[RouteExec]:
        """Return every route reachable in the routes tree.

        Builds the tree if needed. Works on loaded trees too, where
        ``raw_routes`` says nothing about what lookups will see.
        """
        return list(iter_exec_records(self._ensure_built()))

    # -- Registration --

    def add_route(self, method: str | Iterable[str], pattern: str, action: Any) -> None:
        """Register *action* for *pattern* under one or more methods.

        *method* is a single token or an iterable of tokens. The ``any``
        token binds the action to every configured method.

        Raises ``InvalidMethod`` for a token outside the vocabulary.
        Raises ``ConfigurationError`` when no method is given.
        Raises ``RuntimeError`` once the routes tree is built.
        """
        methods = [method] if isinstance(method, str) else list(method)
        if not methods:
            msg = f"No method given for route {pattern!r}"
            raise ConfigurationError(msg)
        allowed = self._config.allowed_methods
        for m in methods:
            if m not in allowed:
                raise InvalidMethod(m, allowed)

        if self._root is not None:
            msg = "Cannot add routes after the routes tree is built."
            raise RuntimeError(msg)

        if self._config.any_method in methods:
            methods = list(self._config.methods)

        self._raw_routes.append(RawRoute(pattern=pattern, actions=dict.fromkeys(methods, action)))

    def route(self, method: str | Iterable[str], pattern: str) -> Callable[[_A], _A]:
        """Register the decorated callable as the action for *pattern*."""

        def decorator(func: _A) -> _A:
            self.add_route(method, pattern, func)
            return func

        return decorator

    # -- Build / transfer --

    def build(self) -> None:
        """Compile the registered routes into the routes tree.

        No-op if the tree already exists (built or loaded).
        """
        self._ensure_built()

    def _ensure_built(self) -> TrieNode:
        if self._root is None:
            self._root = build_tree(self._raw_routes)
            logger.debug("Built routes tree from %d routes", len(self._raw_routes))
        return self._root

    def dump(self) -> dict[str, Any]:
        """Export the routes tree as plain nested dicts, building it if needed.

        Hand the result to ``load()`` on another router to skip the build.
        """
        return dump_tree(self._ensure_built())

    def load(self, tree: dict[str, Any]) -> None:
        """Replace the routes tree with one exported by ``dump()``.

        Previously registered routes no longer affect lookups.
        """
        self._root = load_tree(tree)
        logger.debug("Loaded routes tree, replacing %d registered routes", len(self._raw_routes))

    # -- Lookup --

    def find_route(self, method: str, path: str) -> RouteMatch:
        """Resolve *method* and *path* to a registered action.

        At every depth a static child wins over the required child, which
        wins over the optional child. Trailing optional segments missing
        from *path* are skipped until a node with a route is reached.

        Returns a ``RouteMatch`` on success.
        Raises ``RouteNotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        node = self._ensure_built()
        params: dict[str, str] = {}

        for part in split_path(path):
            if part in node.children:
                node = node.children[part]
            elif node.required_child is not None:
                node = node.required_child
                params[node.name or ""] = part
            elif node.optional_child is not None:
                node = node.optional_child
                params[node.name or ""] = part
            else:
                logger.debug("No route for %s %r", method, path)
                raise RouteNotFound(path)

        while node.exec_record is None and node.optional_child is not None:
            node = node.optional_child

        record = node.exec_record
        if record is None:
            logger.debug("No route for %s %r", method, path)
            raise RouteNotFound(path)

        if method not in record.actions:
            raise MethodNotAllowed(method, frozenset(record.actions))

        return RouteMatch(
            pattern=record.pattern,
            method=method,
            action=record.actions[method],
            params=params,
        )
