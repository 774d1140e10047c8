"""Wren CLI — inspect and exercise a navigator's routes.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="wren — URL pattern routing for apps and tools.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "navigator",
        help="Import string (e.g. myapp.urls:navigator)",
    )

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a URL selects")
    match_parser.add_argument(
        "navigator",
        help="Import string (e.g. myapp.urls:navigator)",
    )
    match_parser.add_argument("url", help="URL to match (e.g. myapp://user/42)")
    match_parser.add_argument(
        "--scheme",
        default=None,
        help="Override the navigator's default scheme for this lookup",
    )

    # -- wren check -------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Report unreachable routes")
    check_parser.add_argument(
        "navigator",
        help="Import string (e.g. myapp.urls:navigator)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
    elif args.command == "check":
        from wren.cli._check import run_check

        run_check(args)
