"""
Keyword-based capability matcher for weather queries.

The matcher decides whether a query asks for the weather, the temperature or
the rain status, or none of them (in which case the conversational responder
answers). Overlapping keywords are resolved by the fixed order of
``CAPABILITY_RULES``: the first rule whose keyword conditions hold wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Literal, Optional, Tuple

CapabilityLabel = Literal["weather", "temperature", "rain", "none"]


@dataclass(frozen=True)
class CapabilityRule:
    """One row of the decision table.

    ``all_of`` must all appear, at least one of ``any_of`` must appear (when
    given), and none of ``none_of`` may appear.
    """

    label: CapabilityLabel
    reason: str
    all_of: FrozenSet[str] = frozenset()
    any_of: FrozenSet[str] = frozenset()
    none_of: FrozenSet[str] = frozenset()

    def matches(self, text: str) -> bool:
        if not all(keyword in text for keyword in self.all_of):
            return False
        if self.any_of and not any(keyword in text for keyword in self.any_of):
            return False
        return not any(keyword in text for keyword in self.none_of)


# Order is priority: weather beats temperature when both are mentioned.
CAPABILITY_RULES: Tuple[CapabilityRule, ...] = (
    CapabilityRule(
        label="weather",
        reason="weather and temperature both mentioned, weather takes priority",
        all_of=frozenset({"weather", "temperature"}),
    ),
    CapabilityRule(
        label="weather",
        reason="weather mentioned without temperature or rain",
        all_of=frozenset({"weather"}),
        none_of=frozenset({"temperature", "rain"}),
    ),
    CapabilityRule(
        label="temperature",
        reason="temperature mentioned without weather",
        all_of=frozenset({"temperature"}),
        none_of=frozenset({"weather"}),
    ),
    CapabilityRule(
        label="rain",
        reason="rain mentioned",
        any_of=frozenset({"rain", "raining"}),
    ),
)


@dataclass
class CapabilityResult:
    label: CapabilityLabel
    reason: str = ""


def classify_capability(query: Optional[str]) -> CapabilityResult:
    """Classify the query into one capability label (``none`` when nothing applies)."""
    text = (query or "").lower()
    if not text.strip():
        return CapabilityResult(label="none", reason="blank query")

    for rule in CAPABILITY_RULES:
        if rule.matches(text):
            return CapabilityResult(label=rule.label, reason=rule.reason)

    return CapabilityResult(label="none", reason="no capability keywords detected")
