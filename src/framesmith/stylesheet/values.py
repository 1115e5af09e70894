"""Point-of-use parsing for raw declaration values."""

from __future__ import annotations

import re

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_integer(value: str | None) -> int | None:
    """Parse the leading integer of a CSS value: ``"200px"`` -> 200.

    Returns None when the value does not start with digits (``auto``,
    ``inherit``, empty strings).
    """
    if value is None:
        return None
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return None
    return int(match.group(1))
