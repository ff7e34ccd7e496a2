__version__ = "0.1.0"

from .contracts.artifacts import PatternRule, Pin, Module
from .contracts.enums import PinDirection
from .contracts.errors import (
    CdlFixerError,
    ContractError,
    ValidationError,
    OperatorError,
    ModuleFileError,
)
from .contracts.operators import Operator, OperatorResult
from .contracts.provenance import ArtifactFingerprint, Provenance
from .config import FixerConfig
from .domain.cdl import LineStore, format_si, parse_si, solve_rectangle
from .domain.soc_mod import load_soc_mod, parse_soc_mod
from .operators import (
    CaseNormalizeOperator,
    CdlFixOperator,
    GeometryDeriveOperator,
    PinInfoAnnotateOperator,
    SectionInjectOperator,
)
from .pipeline import fix_cdl_text, load_module_table

__all__ = [
    "__version__",
    # artifacts
    "PatternRule",
    "Pin",
    "Module",
    # enums
    "PinDirection",
    # errors
    "CdlFixerError",
    "ContractError",
    "ValidationError",
    "OperatorError",
    "ModuleFileError",
    # protocols
    "Operator",
    "OperatorResult",
    # provenance
    "ArtifactFingerprint",
    "Provenance",
    # config
    "FixerConfig",
    # domain
    "LineStore",
    "format_si",
    "parse_si",
    "solve_rectangle",
    "load_soc_mod",
    "parse_soc_mod",
    # operators
    "SectionInjectOperator",
    "CaseNormalizeOperator",
    "GeometryDeriveOperator",
    "PinInfoAnnotateOperator",
    "CdlFixOperator",
    # pipeline
    "fix_cdl_text",
    "load_module_table",
]
