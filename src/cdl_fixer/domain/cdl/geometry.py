from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Pattern, Tuple
import logging
import math
import re

import numpy as np

from .lines import LineStore
from .si_units import format_si, parse_si


logger = logging.getLogger(__name__)

_FIELD_W = re.compile(r"w=([0-9]+\.?[0-9]*[a-zA-Z]+)")
_FIELD_L = re.compile(r"l=([0-9]+\.?[0-9]*[a-zA-Z]+)")
_FIELD_FINGERS = re.compile(r"fingers=([0-9]+\.?[0-9]*[a-zA-Z]*)")
_FIELD_AREA = re.compile(r"area=([0-9]+\.?[0-9]*[a-zA-Z]+)")
_FIELD_PJ = re.compile(r"pj=([0-9]+\.?[0-9]*[a-zA-Z]+)")


@dataclass(frozen=True)
class DerivedLine:
    text: str
    fw_added: bool = False
    wl_added: bool = False
    wl_skipped: bool = False


@dataclass
class GeometryStats:
    fw_added: int = 0
    wl_added: int = 0
    skipped: int = 0


def _find_field(pattern: Pattern[str], line: str) -> Optional[float]:
    match = pattern.search(line)
    if match is None:
        return None
    # Parse from the value start to end of line so exponents ("1e-6") survive.
    return parse_si(line[match.start(1):])


def solve_rectangle(area: float, perimeter: float) -> Optional[Tuple[float, float]]:
    """Recover ``(w, l)`` of a rectangle from its area and perimeter.

    Solves ``P = 2(w + l)``, ``A = w * l`` and returns the root pair with
    ``l >= w``. Returns None when the discriminant is negative or when neither
    root is positive. Zero-length roots divide to inf/nan instead of raising.
    """
    a = np.float64(area)
    p = np.float64(perimeter)
    with np.errstate(divide="ignore", invalid="ignore"):
        delta = p * p / 4 - 4 * a
        if delta < 0:
            return None
        root = np.sqrt(delta)
        l1 = (p / 2 + root) / 2
        l2 = (p / 2 - root) / 2
        if l1 <= 0 and l2 <= 0:
            return None
        w1 = a / l1
        w2 = a / l2
    if l1 >= w1:
        return float(w1), float(l1)
    return float(w2), float(l2)


def finger_width(w: float, fingers: Optional[float]) -> float:
    if fingers is None or math.isnan(fingers):
        return w
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(w) / np.float64(fingers))


def derive_line(line: str) -> DerivedLine:
    """Append derived ``fw=`` and/or ``w= l=`` fields to one netlist line."""
    fw_added = wl_added = wl_skipped = False

    w = _find_field(_FIELD_W, line)
    l = _find_field(_FIELD_L, line)
    fingers = _find_field(_FIELD_FINGERS, line)

    # Only the presence of l matters here; its value is not part of fw.
    if w is not None and l is not None:
        line = f"{line} fw={format_si(finger_width(w, fingers))}"
        fw_added = True

    area = _find_field(_FIELD_AREA, line)
    pj = _find_field(_FIELD_PJ, line)
    if area is not None and pj is not None:
        solved = solve_rectangle(area, pj)
        if solved is None:
            logger.debug("no real rectangle for area=%g pj=%g", area, pj)
            wl_skipped = True
        else:
            rect_w, rect_l = solved
            line = f"{line} w={format_si(rect_w)} l={format_si(rect_l)}"
            wl_added = True

    return DerivedLine(text=line, fw_added=fw_added, wl_added=wl_added, wl_skipped=wl_skipped)


def derive_geometry(store: LineStore) -> GeometryStats:
    stats = GeometryStats()
    for idx, line in enumerate(store.lines):
        derived = derive_line(line)
        store[idx] = derived.text
        stats.fw_added += derived.fw_added
        stats.wl_added += derived.wl_added
        stats.skipped += derived.wl_skipped
    return stats
