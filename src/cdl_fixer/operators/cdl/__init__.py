from .stages import (
    CaseNormalizeOperator,
    GeometryDeriveOperator,
    PinInfoAnnotateOperator,
    SectionInjectOperator,
)
from .fix import CdlFixOperator
