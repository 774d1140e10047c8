"""``wren match`` — show which route a URL selects and what it captures.

Only matches; never calls the factory or handler. Exits with code 1 when
no route matches.
"""

import argparse

from wren.cli._resolve import load_or_exit
from wren.url.scheme import normalize_scheme


def run_match(args: argparse.Namespace) -> None:
    """Print the winning route and its values for ``args.url``."""
    navigator = load_or_exit(args.navigator)

    scheme = navigator.scheme if args.scheme is None else normalize_scheme(args.scheme)
    found = navigator.router.match(args.url, scheme)
    if found is None:
        print(f"No route matches {args.url!r}")
        raise SystemExit(1)

    route = found.route
    position = next(i for i, r in enumerate(navigator.router.routes, start=1) if r is route)
    print(f"{route.pattern.source}  (#{position}, {route.kind}: {route.handler_name})")
    for key, value in found.values.items():
        source = "path" if key in found.path_params else "query"
        print(f"  {key} = {value!r}  [{source}]")
