"""``wren routes`` — list registered routes in match order."""

import argparse

from wren.cli._resolve import load_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of ORDER, KIND, PATTERN, and handler name.

    Order matters: the first matching row wins.
    """
    navigator = load_or_exit(args.navigator)

    routes = navigator.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for index, route in enumerate(routes, start=1):
        handler_name = route.handler_name
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        source = route.pattern.source
        if route.pattern.scheme and "://" not in source:
            source = f"{source}  [{route.pattern.scheme}]"
        rows.append((str(index), route.kind, source, handler_name))

    max_order = max(max(len(r[0]) for r in rows), 1)
    max_kind = max(max(len(r[1]) for r in rows), 4)  # "KIND" header
    max_pattern = max(max(len(r[2]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:>{max_order}}}  {{:<{max_kind}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("#", "KIND", "PATTERN", "HANDLER"))
    sep_len = max_order + max_kind + max_pattern + 6 + max((len(r[3]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
