"""YAML configuration for named Zipf workloads.

A workload file lists streams to build::

    workloads:
      - name: hot-keys
        kind: indices
        start: 1
        end: 10000
        s: 1.07
        seed: 42
      - name: tenants
        kind: array
        offset: 1
        values: [alpha, beta, gamma]
        s: 0.8
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

from .distributions import Zipf
from .errors import ZipfError
from .sampling import array_access, indices_access

logger = logging.getLogger(__name__)

ENV_VAR = "ZIPFLOAD_WORKLOADS"

WorkloadKind = Literal["values", "indices", "array"]
_KINDS: tuple[str, ...] = ("values", "indices", "array")


@dataclass(slots=True)
class WorkloadSpec:
    """Describe one configured Zipf stream."""

    name: str
    kind: WorkloadKind
    s: float
    start: float | None = None
    end: float | None = None
    offset: int | None = None
    values: list[Any] = field(default_factory=list)
    seed: int | None = None

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> WorkloadSpec:
        if not isinstance(item, Mapping):
            raise TypeError(f"Workload entries must be mappings, got {type(item).__name__}.")
        kind = str(item.get("kind", "values"))
        if kind not in _KINDS:
            raise ValueError(f"Unknown workload kind '{kind}'. Expected one of {_KINDS}.")
        seed = item.get("seed")
        common = {
            "name": str(item["name"]),
            "kind": kind,
            "s": float(item["s"]),
            "seed": int(seed) if seed is not None else None,
        }
        if kind == "array":
            raw_values = item.get("values") or []
            if not isinstance(raw_values, list):
                raise TypeError(f"Workload '{common['name']}' values must be a list.")
            return cls(offset=int(item.get("offset", 1)), values=list(raw_values), **common)
        return cls(start=float(item["start"]), end=float(item["end"]), **common)

    def distribution(self) -> Zipf:
        """Build the underlying handle (``values`` and ``indices`` kinds)."""
        if self.kind == "array":
            raise ValueError("Array workloads do not expose a single continuous range.")
        return Zipf(self.start, self.end, self.s)  # type: ignore[arg-type]

    def stream(self) -> Iterator[Any]:
        """Return the configured infinite stream."""
        if self.kind == "array":
            return array_access(self.offset or 0, self.values, self.s, seed=self.seed)
        if self.kind == "indices":
            return indices_access(range(int(self.start), int(self.end)), self.s, seed=self.seed)  # type: ignore[arg-type]
        return self.distribution().iter(seed=self.seed)


def load_workloads(path: str | os.PathLike[str]) -> dict[str, WorkloadSpec]:
    """Load named workloads from a YAML file, skipping invalid entries."""
    path = Path(path)
    if not path.exists():
        logger.debug("Skipping workload config %s (file not found)", path)
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        logger.warning("Failed to parse workload config %s: %s", path, exc)
        return {}
    if not isinstance(data, Mapping):
        logger.warning("Skipping workload config %s (top level must be a mapping)", path)
        return {}
    items = data.get("workloads") or []
    if not isinstance(items, list):
        logger.warning("Skipping workload config %s ('workloads' must be a list)", path)
        return {}

    workloads: dict[str, WorkloadSpec] = {}
    for item in items:
        try:
            spec = WorkloadSpec.from_mapping(item)
            spec.stream()
        except (ZipfError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping workload from %s (spec=%s): %s", path, item, exc)
            continue
        if spec.name in workloads:
            logger.debug("Workload '%s' redefined in %s", spec.name, path)
        workloads[spec.name] = spec
    return workloads


def load_env_workloads(env_var: str = ENV_VAR) -> dict[str, WorkloadSpec]:
    """Merge workload files listed in ``env_var`` (``os.pathsep`` separated)."""
    workloads: dict[str, WorkloadSpec] = {}
    env_paths = os.environ.get(env_var)
    if env_paths:
        for item in env_paths.split(os.pathsep):
            if item:
                workloads.update(load_workloads(item))
    return workloads


__all__ = [
    "ENV_VAR",
    "WorkloadKind",
    "WorkloadSpec",
    "load_workloads",
    "load_env_workloads",
]
