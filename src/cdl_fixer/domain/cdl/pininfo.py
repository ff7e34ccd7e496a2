from __future__ import annotations

from typing import Mapping, Optional
import logging

from ...contracts.artifacts import Module
from .lines import LineStore


logger = logging.getLogger(__name__)

SUBCKT_KEYWORD = ".SUBCKT"
PININFO_KEYWORD = "*.PININFO"


def build_pininfo_line(module: Module) -> str:
    parts = [PININFO_KEYWORD]
    parts.extend(f"{pin.name}:{pin.direction.value}" for pin in module.pins)
    return " ".join(parts)


def subckt_name(line: str) -> Optional[str]:
    """Name token of a ``.SUBCKT`` definition line, or None for other lines."""
    if not line.startswith(SUBCKT_KEYWORD):
        return None
    tokens = line[len(SUBCKT_KEYWORD):].split()
    return tokens[0] if tokens else None


def annotate_pininfo(store: LineStore, modules: Mapping[str, Module]) -> int:
    """Insert or refresh the ``*.PININFO`` line after each known ``.SUBCKT``.

    Returns the number of subcircuits annotated.
    """
    annotated = 0
    idx = 0
    while idx < len(store):
        name = subckt_name(store[idx])
        module = modules.get(name) if name is not None else None
        if module is not None and module.pins:
            pininfo = build_pininfo_line(module)
            nxt = idx + 1
            if nxt < len(store) and store[nxt].startswith(PININFO_KEYWORD):
                store[nxt] = pininfo
            else:
                store.insert(nxt, pininfo)
            annotated += 1
            idx = nxt
        elif name is not None:
            logger.debug("no pin information for subckt %s", name)
        idx += 1
    return annotated
