from __future__ import annotations

from typing import List, Sequence, Tuple
import re

from ...contracts.artifacts import PatternRule
from .lines import LineStore


_RULE_LINE = "*" * 72

# Declared order; each missing marker is prepended, so inserted markers come out reversed.
SECTION_RULES: Tuple[PatternRule, ...] = (
    PatternRule(r"^\.PARAM", ".PARAM"),
    PatternRule(r"^\*\.MEGA", "*.MEGA"),
    PatternRule(r"^\*\.EQUATION", "*.EQUATION"),
    PatternRule(r"^\*\.DIOAREA", "*.DIOAREA"),
    PatternRule(r"^\*\.DIOPERI", "*.DIOPERI"),
    PatternRule(r"^\*\.CAPVAL", "*.CAPVAL"),
    PatternRule(r"^\*\.RESVAL", "*.RESVAL"),
    PatternRule(r"^\*\.BIPOLAR", "*.BIPOLAR"),
)

NETLIST_BANNER = f"\n{_RULE_LINE}\n* CDL netlist\n{_RULE_LINE}\n"


def generator_banner(generator: str) -> str:
    return f"{_RULE_LINE}\n* Generated by {generator}\n\n* CDL parameter\n{_RULE_LINE}\n"


def ensure_present(store: LineStore, pattern: str, insert_line: str) -> bool:
    """Prepend ``insert_line`` unless ``pattern`` matches some line of the store.

    ``pattern`` is searched over the joined buffer in multi-line mode, so ``^``
    anchors at every line start. Returns True when a line was inserted.
    """
    if re.search(pattern, store.join(), re.MULTILINE):
        return False
    store.prepend(insert_line)
    return True


def inject_section_markers(store: LineStore, rules: Sequence[PatternRule] = SECTION_RULES) -> List[str]:
    """Ensure every section marker exists; returns the markers that were added."""
    inserted: List[str] = []
    for rule in rules:
        if ensure_present(store, rule.pattern, rule.replacement):
            inserted.append(rule.replacement)
    return inserted


def prepend_netlist_banner(store: LineStore) -> None:
    store.prepend(NETLIST_BANNER)


def prepend_generator_banner(store: LineStore, generator: str) -> None:
    store.prepend(generator_banner(generator))
