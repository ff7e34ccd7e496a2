from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import hashlib
import json
import math
import time


def stable_hash_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def stable_hash_str(s: str) -> str:
    return stable_hash_bytes(s.encode("utf-8", errors="ignore"))


def _to_jsonable(obj: Any) -> Any:
    if obj is None or isinstance(obj, (str, int, bool)):
        return obj
    if isinstance(obj, float):
        # Strict JSON doesn't permit NaN/Infinity.
        return obj if math.isfinite(obj) else None
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(v) for v in obj]
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    return str(obj)


def stable_hash_json(obj: Any) -> str:
    """Stable hash using JSON with sorted keys and normalized containers."""
    normalized = _to_jsonable(obj)
    data = json.dumps(normalized, sort_keys=True, separators=(",", ":"), allow_nan=False).encode("utf-8")
    return stable_hash_bytes(data)


@dataclass(frozen=True)
class ArtifactFingerprint:
    """Stable identity for an artifact's content."""
    sha256: str


@dataclass
class Provenance:
    """Execution trace for an operator call."""
    operator: str
    version: str = "0.0"
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    inputs: Dict[str, ArtifactFingerprint] = field(default_factory=dict)
    outputs: Dict[str, ArtifactFingerprint] = field(default_factory=dict)
    notes: Dict[str, Any] = field(default_factory=dict)

    def finish(self) -> None:
        self.end_time = time.time()

    def duration_s(self) -> Optional[float]:
        if self.end_time is None:
            return None
        return max(0.0, self.end_time - self.start_time)
