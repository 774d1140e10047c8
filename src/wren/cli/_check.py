"""``wren check`` — route reachability validation command.

Resolves an import string to a Navigator, prints the check summary,
and exits with code 1 if errors are found.
"""

import argparse

from wren.checks import check_routes
from wren.cli._resolve import load_or_exit


def run_check(args: argparse.Namespace) -> None:
    """Check a navigator's routes for shadowing and converter typos."""
    navigator = load_or_exit(args.navigator)

    result = check_routes(navigator.router)
    print(result.summary())
    if not result.ok:
        raise SystemExit(1)
