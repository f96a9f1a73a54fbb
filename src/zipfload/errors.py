"""Validation errors raised when building Zipf distributions and streams.

Each error keeps the offending inputs in ``args`` so instances compare,
copy and pickle by value.
"""

from __future__ import annotations

__all__ = [
    "ZipfError",
    "InvalidPowerParameter",
    "InvalidRangeStart",
    "InvalidRangeEnd",
    "EmptyArray",
]


class ZipfError(ValueError):
    """Base class for invalid Zipf construction parameters."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.args))


class InvalidPowerParameter(ZipfError):
    """The power parameter ``s`` must be greater than 0."""

    def __init__(self, s: float) -> None:
        super().__init__(s)

    @property
    def s(self) -> float:
        return self.args[0]

    def __str__(self) -> str:
        return f"Power parameter s must be > 0, got: {self.s}"


class InvalidRangeStart(ZipfError):
    """The range start must be greater than 0."""

    def __init__(self, start: float) -> None:
        super().__init__(start)

    @property
    def start(self) -> float:
        return self.args[0]

    def __str__(self) -> str:
        return f"Range start must be > 0, got: {self.start}"


class InvalidRangeEnd(ZipfError):
    """The range end must be greater than the start."""

    def __init__(self, start: float, end: float) -> None:
        super().__init__(start, end)

    @property
    def start(self) -> float:
        return self.args[0]

    @property
    def end(self) -> float:
        return self.args[1]

    def __str__(self) -> str:
        return f"Range end must be > start, got: {self.start}..{self.end}"


class EmptyArray(ZipfError):
    """Array access needs at least one element."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Array cannot be empty"
