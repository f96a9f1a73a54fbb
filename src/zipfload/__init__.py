"""Top-level package exports for zipfload."""

from __future__ import annotations

from importlib import metadata

__version__ = "0.1.0"

try:
    __version__ = metadata.version("zipfload")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
    pass

from . import distributions as distributions  # noqa: F401
from . import sampling as sampling  # noqa: F401
from .config import WorkloadSpec, load_env_workloads, load_workloads  # noqa: F401
from .distributions import Zipf  # noqa: F401
from .errors import (  # noqa: F401
    EmptyArray,
    InvalidPowerParameter,
    InvalidRangeEnd,
    InvalidRangeStart,
    ZipfError,
)
from .sampling import DEFAULT_SEED, ZipfIterator, array_access, indices_access  # noqa: F401
from .summary import access_frequencies, take  # noqa: F401

__all__ = [
    "__version__",
    "distributions",
    "sampling",
    "Zipf",
    "ZipfIterator",
    "DEFAULT_SEED",
    "indices_access",
    "array_access",
    "ZipfError",
    "InvalidPowerParameter",
    "InvalidRangeStart",
    "InvalidRangeEnd",
    "EmptyArray",
    "WorkloadSpec",
    "load_workloads",
    "load_env_workloads",
    "access_frequencies",
    "take",
]
