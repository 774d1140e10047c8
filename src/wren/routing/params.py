"""Placeholder converters and type conversion.

Built-in converters for pattern placeholders like ``<int:id>``.
"""

import re

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"[+-]?[0-9]+", int),
    "path": (r".*", str),
}

_COMPILED: dict[str, re.Pattern[str]] = {
    name: re.compile(pattern, re.ASCII) for name, (pattern, _) in CONVERTERS.items()
}


def convert_param(value: str, param_type: str) -> str | int:
    """Convert a captured path segment string to the target type.

    The whole value must match the converter's pattern: ``" 42"``,
    ``"4_2"`` and ``"٤٢"`` are rejected for ``int`` even though ``int()``
    would accept them.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    if _COMPILED[param_type].fullmatch(value) is None:
        msg = f"{value!r} is not a valid {param_type} value"
        raise ValueError(msg)
    return target_type(value)
