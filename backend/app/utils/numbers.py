"""Lenient number parsing for text fields that may hold partial input."""

from __future__ import annotations

import re
from typing import Optional

# Longest numeric prefix, the way browsers read a half-typed field:
# "12abc" -> 12, "1." -> 1, "-" / "" / "abc" -> nothing.
_NUMBER_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse the leading number in ``text``. Returns None when there is none."""
    if not text:
        return None
    m = _NUMBER_PREFIX_RE.match(text)
    if m is None:
        return None
    return float(m.group(1))
