"""``treeroute routes`` — list the routes in a router's routes tree.

Resolves an import string to a Router and prints every route with its
methods, pattern, and action.
"""

import argparse
import logging
import sys
from typing import Any

from treeroute.cli._resolve import resolve_router

logger = logging.getLogger("treeroute.cli")


def describe_action(action: Any) -> str:
    """Short display name for an opaque action."""
    return getattr(action, "__name__", None) or str(action)


def run_routes(args: argparse.Namespace) -> None:
    """List routes for a treeroute Router.

    Resolves ``args.router``, builds it if needed, and prints a table of
    METHOD, PATTERN, and ACTION. Methods bound to different actions on
    the same pattern get a row each.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    logger.debug("Resolved %r with %d routes", args.router, len(routes))
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (methods_str, pattern, action_name)
    rows: list[tuple[str, str, str]] = []
    for record in routes:
        by_action: dict[str, list[str]] = {}
        for method, action in record.actions.items():
            by_action.setdefault(describe_action(action), []).append(method)
        for action_name, methods in by_action.items():
            rows.append((", ".join(sorted(methods)), record.pattern, action_name))

    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "ACTION"))
    sep_len = max_methods + max_pattern + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for methods_str, pattern, action_name in rows:
        print(fmt.format(methods_str, pattern, action_name))
