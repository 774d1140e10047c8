"""Navigator import resolution — ``"module:attribute"`` strings to Navigators.

Shared by every ``wren`` subcommand to locate a Navigator from a
user-supplied import string.
"""

import importlib
import sys

from wren.navigator import Navigator


def resolve_navigator(import_string: str) -> Navigator:
    """Resolve an import string to a wren Navigator instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"navigator"`` (e.g. ``"myapp.urls"``
    resolves to ``myapp.urls.navigator``).

    Supports factory functions: if the resolved object is callable and
    not a Navigator, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Navigator or callable.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "navigator"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Navigator):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Navigator):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a wren.Navigator instance"
        raise TypeError(msg)

    return obj


def load_or_exit(import_string: str) -> Navigator:
    """Resolve *import_string* or print the error and exit with status 1."""
    try:
        return resolve_navigator(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
