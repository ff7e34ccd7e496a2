"""Reader for ``.soc_mod`` module description files.

The format is a fixed-indentation outline::

    # comment
    my_module:
        CLK:
          direction: input
        DATA:
          direction: inout

Module names sit at column 0, pin names at indent 4 and the ``direction:`` key
at indent 6. Only the first letter of the direction value matters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from ..contracts.artifacts import Module, Pin
from ..contracts.enums import PinDirection
from ..contracts.errors import ModuleFileError


MODULE_INDENT = 0
PIN_INDENT = 4
DIRECTION_INDENT = 6
_DIRECTION_KEY = "direction:"


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def parse_soc_mod(text: str) -> Dict[str, Module]:
    """Build the module table; the first declaration of a name wins."""
    order: List[str] = []
    pins_by_module: Dict[str, List[Pin]] = {}
    current: Optional[List[Pin]] = None

    for raw in text.splitlines():
        indent = _indent_of(raw)
        body = raw[indent:]
        if not body or body.startswith("#"):
            continue

        if indent == MODULE_INDENT:
            name = body.split(":", 1)[0]
            current = []
            if name not in pins_by_module:
                order.append(name)
                pins_by_module[name] = current
        elif indent == PIN_INDENT:
            if current is None:
                continue
            pin_name = body.split()[0].split(":", 1)[0]
            current.append(Pin(name=pin_name))
        elif indent == DIRECTION_INDENT and _DIRECTION_KEY in body:
            if not current:
                continue
            value = body.split(_DIRECTION_KEY, 1)[1].strip()
            current[-1] = Pin(name=current[-1].name, direction=PinDirection.from_token(value))

    return {name: Module(name=name, pins=tuple(pins_by_module[name])) for name in order}


def load_soc_mod(path: Union[str, Path]) -> Dict[str, Module]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ModuleFileError(f"failed to open module file: {path}") from exc
    return parse_soc_mod(text)
