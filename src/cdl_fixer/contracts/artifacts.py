from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .enums import PinDirection


@dataclass(frozen=True)
class PatternRule:
    pattern: str
    replacement: str


@dataclass(frozen=True)
class Pin:
    name: str
    direction: PinDirection = PinDirection.inout


@dataclass(frozen=True)
class Module:
    """A module from a .soc_mod file: name plus pins in declaration order."""
    name: str
    pins: Tuple[Pin, ...] = ()
