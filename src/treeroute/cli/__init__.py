"""treeroute CLI — inspect and query a router from the shell.

Entry point registered as ``treeroute`` in ``pyproject.toml``::

    [project.scripts]
    treeroute = "treeroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``treeroute`` command."""
    parser = argparse.ArgumentParser(
        prog="treeroute",
        description="treeroute — regex-free URL-to-action routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- treeroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in the routes tree")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- treeroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a method and path")
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    match_parser.add_argument("method", help="Request method (e.g. get)")
    match_parser.add_argument("path", help="Request path (e.g. /user/7)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from treeroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from treeroute.cli._match import run_match

        run_match(args)
