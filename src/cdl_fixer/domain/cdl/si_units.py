from __future__ import annotations

from typing import Dict, Tuple
import math
import re


# Ordered from largest to smallest so formatting picks the biggest divisor that fits.
SI_PREFIXES: Tuple[Tuple[str, float], ...] = (
    ("Y", 1e24),
    ("Z", 1e21),
    ("E", 1e18),
    ("P", 1e15),
    ("T", 1e12),
    ("G", 1e9),
    ("M", 1e6),
    ("k", 1e3),
    ("h", 1e2),
    ("da", 1e1),
    ("d", 1e-1),
    ("c", 1e-2),
    ("m", 1e-3),
    ("u", 1e-6),
    ("n", 1e-9),
    ("p", 1e-12),
    ("f", 1e-15),
    ("a", 1e-18),
    ("z", 1e-21),
    ("y", 1e-24),
)

_UNIT_MULTIPLIERS: Dict[str, float] = dict(SI_PREFIXES)

_SI_LITERAL = re.compile(
    r"\s*(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(?P<unit>[a-zA-Z]*)"
)

DEFAULT_MAX_LEN = 128


def parse_si(text: str) -> float:
    """Parse an SI-suffixed literal such as ``"1.2u"`` into a float.

    Returns ``nan`` when no numeric literal leads the string. A suffix that is
    not one of the known prefixes (matching is case-sensitive, ``m`` is milli and
    ``M`` is mega) leaves the number unscaled.
    """
    match = _SI_LITERAL.match(text)
    if match is None:
        return math.nan
    value = float(match.group("number"))
    multiplier = _UNIT_MULTIPLIERS.get(match.group("unit"))
    if multiplier is None:
        return value
    return value * multiplier


def format_si(value: float, max_len: int = DEFAULT_MAX_LEN) -> str:
    """Render ``value`` with the largest SI prefix whose divisor it reaches.

    Values below 1e-24 in magnitude (zero included) and NaN fall back to a
    plain ``%g`` rendering without a suffix. The result never exceeds
    ``max_len - 1`` characters.
    """
    rendered = "%g" % value
    for unit, divisor in SI_PREFIXES:
        if abs(value) >= divisor and divisor != 1:
            rendered = "%g%s" % (value / divisor, unit)
            break
    return rendered[: max(max_len - 1, 0)]
