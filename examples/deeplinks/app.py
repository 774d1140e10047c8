"""Deep links — routing app URLs to screens and actions.

Demonstrates scheme-less patterns under a default scheme, typed
placeholders, a factory that declines, open-handlers, and a catch-all
registered last.

Run:
    python app.py myapp://user/42
    wren routes app:navigator
"""

import sys
from dataclasses import dataclass, field

from wren import Navigator, NavigatorConfig

navigator = Navigator(NavigatorConfig(scheme="myapp"))
opened: list[str] = []


@dataclass
class Screen:
    name: str
    params: dict[str, object] = field(default_factory=dict)


@navigator.factory("/user/<int:id>")
def user(url, values, context):
    return Screen("user", {"id": values["id"]})


@navigator.factory("/post/<title>")
def post(url, values, context):
    return Screen("post", {"title": values["title"]})


@navigator.factory("/search")
def search(url, values, context):
    # Without ?query= there is nothing to show.
    if "query" not in values:
        return None
    return Screen("search", {"query": values["query"]})


@navigator.handler("/ping")
def ping(url, values):
    opened.append(url)
    return True


@navigator.handler("http://<path:address>")
@navigator.handler("https://<path:address>")
def browser(url, values):
    opened.append(url)
    return True


if __name__ == "__main__":
    for arg in sys.argv[1:]:
        screen = navigator.resolve(arg)
        if screen is not None:
            print(f"{arg} -> {screen}")
        elif navigator.open(arg):
            print(f"{arg} -> opened")
        else:
            print(f"{arg} -> no route")
