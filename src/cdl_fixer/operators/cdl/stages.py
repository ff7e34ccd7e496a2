from __future__ import annotations

from typing import Any, Mapping

from ...contracts.artifacts import Module
from ...contracts.errors import ValidationError
from ...contracts.operators import Operator, OperatorResult
from ...contracts.provenance import ArtifactFingerprint, Provenance, stable_hash_json, stable_hash_str
from ...domain.cdl import (
    LineStore,
    derive_geometry,
    inject_section_markers,
    normalize_case,
    annotate_pininfo,
)


def _require_lines(inputs: Mapping[str, Any], operator: str) -> LineStore:
    lines = inputs.get("lines")
    if not isinstance(lines, LineStore):
        raise ValidationError(f"{operator}: 'lines' must be a LineStore")
    return lines


def _fingerprint(lines: LineStore) -> ArtifactFingerprint:
    return ArtifactFingerprint(sha256=stable_hash_str(lines.join()))


class SectionInjectOperator(Operator):
    """Prepend any missing CDL section marker (.PARAM, *.MEGA, ...)."""

    name = "inject_section_markers"
    version = "0.1.0"

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        lines = _require_lines(inputs, self.name)

        provenance = Provenance(operator=self.name, version=self.version)
        provenance.inputs["lines"] = _fingerprint(lines)

        inserted = inject_section_markers(lines)

        provenance.outputs["lines"] = _fingerprint(lines)
        provenance.outputs["inserted"] = ArtifactFingerprint(sha256=stable_hash_json(inserted))
        provenance.finish()

        return OperatorResult(outputs={"inserted": inserted}, provenance=provenance)


class CaseNormalizeOperator(Operator):
    """Lowercase uppercase SPICE parameter keys (W=, L=, AREA=, ...)."""

    name = "normalize_case"
    version = "0.1.0"

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        lines = _require_lines(inputs, self.name)

        provenance = Provenance(operator=self.name, version=self.version)
        provenance.inputs["lines"] = _fingerprint(lines)

        changed = normalize_case(lines)

        provenance.outputs["lines"] = _fingerprint(lines)
        provenance.finish()

        return OperatorResult(outputs={"changed": changed}, provenance=provenance)


class GeometryDeriveOperator(Operator):
    """Append finger width and area/perimeter derived w/l to device lines."""

    name = "derive_geometry"
    version = "0.1.0"

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        lines = _require_lines(inputs, self.name)

        provenance = Provenance(operator=self.name, version=self.version)
        provenance.inputs["lines"] = _fingerprint(lines)

        stats = derive_geometry(lines)

        provenance.outputs["lines"] = _fingerprint(lines)
        provenance.finish()

        warnings = []
        if stats.skipped:
            warnings.append(f"{stats.skipped} area/pj pair(s) have no real rectangle solution")

        return OperatorResult(
            outputs={
                "fw_added": stats.fw_added,
                "wl_added": stats.wl_added,
                "skipped": stats.skipped,
            },
            provenance=provenance,
            warnings=warnings,
        )


class PinInfoAnnotateOperator(Operator):
    """Insert or refresh *.PININFO lines under known .SUBCKT definitions."""

    name = "annotate_pininfo"
    version = "0.1.0"

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        lines = _require_lines(inputs, self.name)
        modules = inputs.get("modules")
        if not isinstance(modules, Mapping):
            raise ValidationError(f"{self.name}: 'modules' must be a mapping of name -> Module")
        if not all(isinstance(m, Module) for m in modules.values()):
            raise ValidationError(f"{self.name}: 'modules' values must be Module instances")

        provenance = Provenance(operator=self.name, version=self.version)
        provenance.inputs["lines"] = _fingerprint(lines)
        provenance.inputs["modules"] = ArtifactFingerprint(
            sha256=stable_hash_json(
                {name: [(p.name, p.direction.value) for p in m.pins] for name, m in modules.items()}
            )
        )

        annotated = annotate_pininfo(lines, modules)

        provenance.outputs["lines"] = _fingerprint(lines)
        provenance.finish()

        return OperatorResult(outputs={"annotated": annotated}, provenance=provenance)
