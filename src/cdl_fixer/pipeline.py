"""Whole-document driver: netlist text in, fixed netlist text out."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Union
import logging

from .config import FixerConfig
from .contracts.artifacts import Module
from .contracts.errors import ModuleFileError
from .domain.soc_mod import load_soc_mod
from .operators.cdl import CdlFixOperator


logger = logging.getLogger(__name__)


def load_module_table(path: Union[str, Path]) -> Optional[Dict[str, Module]]:
    """Load a .soc_mod file, or log the failure and return None."""
    try:
        modules = load_soc_mod(path)
    except ModuleFileError as exc:
        logger.error("%s; continuing without pin information", exc)
        return None
    logger.info("loaded %d modules from %s", len(modules), path)
    return modules


def fix_cdl_text(
    netlist_text: str,
    config: Optional[FixerConfig] = None,
    modules: Optional[Mapping[str, Module]] = None,
) -> str:
    """Run the full fixer pipeline over a CDL netlist.

    When ``modules`` is not given but ``config.soc_module`` is, the module file
    is loaded here; an unreadable module file only disables annotation.
    """
    config = config or FixerConfig()
    if modules is None and config.soc_module is not None:
        modules = load_module_table(config.soc_module)

    result = CdlFixOperator(config).run({"netlist_text": netlist_text, "modules": modules}, ctx=None)
    for warning in result.warnings:
        logger.warning(warning)
    return result.outputs["fixed_text"]
