from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
import logging

from ...config import FixerConfig
from ...contracts.artifacts import Module
from ...contracts.errors import ValidationError
from ...contracts.operators import Operator, OperatorResult
from ...contracts.provenance import ArtifactFingerprint, Provenance, stable_hash_str
from ...domain.cdl import LineStore, prepend_generator_banner, prepend_netlist_banner
from .stages import (
    CaseNormalizeOperator,
    GeometryDeriveOperator,
    PinInfoAnnotateOperator,
    SectionInjectOperator,
)


logger = logging.getLogger(__name__)


class CdlFixOperator(Operator):
    """Banner + sections + case + geometry + pin info in one shot."""

    name = "cdl_fix"
    version = "0.1.0"

    def __init__(self, config: Optional[FixerConfig] = None) -> None:
        self.config = config or FixerConfig()
        self.config.validate()

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        netlist_text = inputs.get("netlist_text")
        if not isinstance(netlist_text, str):
            raise ValidationError("netlist_text must be provided as a string")
        modules: Optional[Mapping[str, Module]] = inputs.get("modules")
        if modules is not None and not isinstance(modules, Mapping):
            raise ValidationError("modules must be a mapping of name -> Module if provided")

        cfg = self.config
        provenance = Provenance(operator=self.name, version=self.version)
        provenance.inputs["netlist_text"] = ArtifactFingerprint(sha256=stable_hash_str(netlist_text))
        provenance.notes["config"] = cfg.to_dict()

        lines = LineStore.split(netlist_text)
        logger.debug("split netlist into %d lines", len(lines))
        outputs: Dict[str, Any] = {}
        warnings: List[str] = []

        prepend_netlist_banner(lines)
        if cfg.param:
            result = SectionInjectOperator().run({"lines": lines}, ctx)
            outputs["inserted"] = result.outputs["inserted"]
            logger.debug("inserted section markers: %s", result.outputs["inserted"])
        prepend_generator_banner(lines, cfg.generator)

        if cfg.case_conversion:
            result = CaseNormalizeOperator().run({"lines": lines}, ctx)
            outputs["case_changed"] = result.outputs["changed"]
            logger.debug("normalized parameter case on %d lines", result.outputs["changed"])

        if cfg.calc_data:
            result = GeometryDeriveOperator().run({"lines": lines}, ctx)
            outputs.update(result.outputs)
            warnings.extend(result.warnings)
            logger.debug(
                "derived fw on %d lines, w/l on %d lines (%d skipped)",
                result.outputs["fw_added"],
                result.outputs["wl_added"],
                result.outputs["skipped"],
            )

        if modules is not None:
            result = PinInfoAnnotateOperator().run({"lines": lines, "modules": modules}, ctx)
            outputs["annotated"] = result.outputs["annotated"]
            logger.debug("annotated %d subcircuits with pin info", result.outputs["annotated"])

        fixed_text = lines.join()
        outputs["fixed_text"] = fixed_text
        provenance.outputs["fixed_text"] = ArtifactFingerprint(sha256=stable_hash_str(fixed_text))
        provenance.finish()
        logger.debug("%s finished in %.3fs", self.name, provenance.duration_s())

        return OperatorResult(outputs=outputs, provenance=provenance, warnings=warnings)
