from __future__ import annotations

from typing import Sequence, Tuple

from ...contracts.artifacts import PatternRule
from .lines import LineStore


# The leading space keeps e.g. "NW=" or "VDD_L=" untouched.
CASE_RULES: Tuple[PatternRule, ...] = (
    PatternRule(" W=", " w="),
    PatternRule(" L=", " l="),
    PatternRule(" AREA=", " area="),
    PatternRule(" PJ=", " pj="),
    PatternRule(" M=", " m="),
    PatternRule(" FW=", " fw="),
    PatternRule(" C=", " c="),
    PatternRule(" R=", " r="),
    PatternRule(" FINGERS=", " fingers="),
)


def normalize_case(store: LineStore, rules: Sequence[PatternRule] = CASE_RULES) -> int:
    """Lowercase SPICE parameter keys in place; returns the number of lines changed."""
    return store.replace_all(rules)
