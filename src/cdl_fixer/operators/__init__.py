from .cdl import (
    CaseNormalizeOperator,
    CdlFixOperator,
    GeometryDeriveOperator,
    PinInfoAnnotateOperator,
    SectionInjectOperator,
)

__all__ = [
    "CaseNormalizeOperator",
    "CdlFixOperator",
    "GeometryDeriveOperator",
    "PinInfoAnnotateOperator",
    "SectionInjectOperator",
]
