"""Run configuration for the CDL fixer pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, MutableMapping, Optional


DEFAULT_GENERATOR = "cdl_fixer"


@dataclass(slots=True)
class FixerConfig:
    """Which pipeline stages run, and where pin information comes from."""

    param: bool = True
    case_conversion: bool = True
    calc_data: bool = True
    soc_module: Optional[Path] = None
    generator: str = DEFAULT_GENERATOR

    def validate(self) -> None:
        if not self.generator.strip():
            raise ValueError("FixerConfig.generator must be a non-empty string")
        if "\n" in self.generator:
            raise ValueError("FixerConfig.generator must be a single line")
        if self.soc_module is not None and not str(self.soc_module):
            raise ValueError("FixerConfig.soc_module must be a non-empty path when set")

    def to_dict(self) -> MutableMapping[str, Any]:
        return {
            "param": self.param,
            "case_conversion": self.case_conversion,
            "calc_data": self.calc_data,
            "soc_module": str(self.soc_module) if self.soc_module is not None else None,
            "generator": self.generator,
        }
