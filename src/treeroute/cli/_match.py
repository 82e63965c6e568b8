"""``treeroute match`` — resolve one method and path against a router."""

import argparse
import sys

from treeroute.cli._resolve import resolve_router
from treeroute.cli._routes import describe_action
from treeroute.errors import HTTPError


def run_match(args: argparse.Namespace) -> None:
    """Print the match for ``args.method`` and ``args.path``.

    Lookup failures go to stderr with exit status 1.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        match = router.find_route(args.method, args.path)
    except HTTPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"pattern: {match.pattern}")
    print(f"method:  {match.method}")
    print(f"action:  {describe_action(match.action)}")
    for name, value in match.params.items():
        print(f"  {name} = {value}")
