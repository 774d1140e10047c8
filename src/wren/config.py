"""Navigator configuration.

NavigatorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Navigator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavigatorConfig(scheme="myapp", debug=True)
    """

    # Default scheme applied to scheme-less patterns and URLs.
    # Normalized by the navigator, so "myapp://" is accepted.
    scheme: str = ""

    # Log lookup misses and declined factories at INFO instead of DEBUG
    debug: bool = False
