"""
Duration normalization for generator output.

Generators are unreliable about duration formatting. Rather than reject every
near miss, the common shorthands are rewritten into ISO-8601 (PT#H#M#S)
before strict validation:

    "3:00"  -> "PT3M"
    "0:45"  -> "PT45S"
    "20s"   -> "PT20S"
    "1h"    -> "PT1H"
    "12"    -> "PT12M"   (bare integers are read as minutes)

Anything unrecognized is returned as-is so the validator can reject it.
"""

import re
from typing import Any, Optional

ISO_PREFIX = "pt"

# Longer digit runs are not durations; left for the validator to reject
MAX_DURATION_DIGITS = 9

_CLOCK_RE = re.compile(r"^([0-9]{1,2}):([0-5]?[0-9])$")
_UNIT_RE = re.compile(r"^([0-9]+)\s*([hms])$")
_INTEGER_RE = re.compile(r"^[0-9]+$")


def normalize_duration(candidate: Any) -> Any:
    """
    Rewrite a loosely formatted duration string into ISO-8601.

    Non-string input is returned unchanged; this never raises.

    Args:
        candidate: Untrusted value from model output

    Returns:
        The ISO-8601 string when the shorthand is recognized, otherwise the
        original value
    """
    if not isinstance(candidate, str):
        return candidate

    s = candidate.strip().lower()

    if s.startswith(ISO_PREFIX):
        return candidate

    clock = _CLOCK_RE.match(s)
    if clock:
        minutes = int(clock.group(1))
        seconds = int(clock.group(2))
        if minutes > 0 and seconds > 0:
            return f"PT{minutes}M{seconds}S"
        if minutes > 0:
            return f"PT{minutes}M"
        return f"PT{seconds}S"

    unit = _UNIT_RE.match(s)
    if unit:
        n = _parse_count(unit.group(1))
        if n is None:
            return candidate
        return f"PT{n}{unit.group(2).upper()}"

    # Ambiguous: a bare number is taken as minutes (caps and intervals)
    if _INTEGER_RE.match(s):
        n = _parse_count(s)
        if n is not None and n > 0:
            return f"PT{n}M"

    return candidate


def _parse_count(digits: str) -> Optional[int]:
    """int() of an ASCII digit run, or None when it is too long to convert."""
    if len(digits) > MAX_DURATION_DIGITS:
        return None
    try:
        return int(digits)
    except ValueError:
        return None
