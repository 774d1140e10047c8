"""Scheme normalization.

Users hand the navigator schemes in many shapes (``"myapp"``,
``"myapp://"``, ``"myapp://some/path"``). Only the bare token before the
first ``://`` is meaningful.
"""

SCHEME_SEPARATOR = "://"


def normalize_scheme(raw: str) -> str:
    """Return the canonical scheme token for *raw*.

    Everything from the first ``://`` on is discarded, along with any
    trailing ``:``::

        normalize_scheme("myapp")                -> "myapp"
        normalize_scheme("myapp://")             -> "myapp"
        normalize_scheme("myapp://://://123123") -> "myapp"
        normalize_scheme("myapp:")               -> "myapp"

    Idempotent: ``normalize_scheme(normalize_scheme(s)) == normalize_scheme(s)``.
    """
    head, _, _ = raw.partition(SCHEME_SEPARATOR)
    return head.rstrip(":")
