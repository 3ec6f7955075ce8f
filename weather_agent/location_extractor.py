"""
Location extraction from free-text weather queries.

Patterns run against the original-case query (case-insensitively) from the
most specific phrasing ("weather in X") to the least specific trailing
"in X". Each pattern only contributes its first match; a candidate is
rejected when it is a common word or too short, and the next pattern is
tried.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Optional, Pattern, Tuple

# One or two word tokens, e.g. "London" or "New York"
_PLACE = r"(\w+(?:\s+\w+)?)"

MIN_LOCATION_LENGTH = 3

STOPLIST: FrozenSet[str] = frozenset({
    "the", "is", "it", "today", "now", "current",
    "like", "does", "will", "are", "and", "or",
})


@dataclass(frozen=True)
class LocationRule:
    name: str
    pattern: Pattern[str]
    group: int = 1


LOCATION_RULES: Tuple[LocationRule, ...] = (
    LocationRule("weather_in", re.compile(r"weather\s+in\s+" + _PLACE, re.IGNORECASE)),
    LocationRule("temperature_in", re.compile(r"temperature\s+in\s+" + _PLACE, re.IGNORECASE)),
    LocationRule("raining_in", re.compile(r"raining\s+in\s+" + _PLACE, re.IGNORECASE)),
    LocationRule("rain_in", re.compile(r"rain\s+in\s+" + _PLACE, re.IGNORECASE)),
    LocationRule(
        "keyword_for_at",
        re.compile(r"\b(?:weather|temperature|rain)\s+(?:for|at)\s+" + _PLACE, re.IGNORECASE),
    ),
    # Catch-all, anchored to the end so incidental "in ..." phrases are ignored
    LocationRule("trailing_in", re.compile(r"\bin\s+" + _PLACE + r"(?=\s*[?!.]*\s*$)", re.IGNORECASE)),
)


def is_acceptable_location(candidate: str) -> bool:
    """True when the candidate is neither a stoplisted word nor too short."""
    return candidate.lower() not in STOPLIST and len(candidate) >= MIN_LOCATION_LENGTH


def extract_location(query: Optional[str]) -> Optional[str]:
    """Return the first accepted location candidate, or None."""
    if not query:
        return None

    for rule in LOCATION_RULES:
        match = rule.pattern.search(query)
        if not match:
            continue
        candidate = match.group(rule.group).strip()
        if is_acceptable_location(candidate):
            return candidate

    return None
