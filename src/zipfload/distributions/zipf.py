"""The Zipf distribution handle."""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

import numpy as np
from numpy.typing import ArrayLike

from ..errors import InvalidPowerParameter, InvalidRangeEnd, InvalidRangeStart
from .regimes import Regime, ZipfOne, select_regime

if TYPE_CHECKING:
    from ..sampling import ZipfIterator

__all__ = ["Zipf"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Zipf:
    """Generate Zipf distributed variates in ``[start, end)`` with power ``s``.

    Parameters are validated once here and the regime constants are cached,
    so instances are immutable values that can be shared or copied freely.
    ``start`` is usually at least 1 since ``x**-s`` diverges near 0.

    Examples
    --------
    >>> zipf = Zipf(1.0, 100.0, 1.1)
    >>> f"{zipf.sample(0.5):.4f}"
    '7.6891'
    """

    start: float
    end: float
    s: float
    _regime: Regime = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        start = float(self.start)
        end = float(self.end)
        s = float(self.s)
        if s <= 0.0:
            raise InvalidPowerParameter(s)
        if start <= 0.0:
            raise InvalidRangeStart(start)
        if end <= start:
            raise InvalidRangeEnd(start, end)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "s", s)
        object.__setattr__(self, "_regime", select_regime(start, end, s))
        logger.debug("Zipf(%s..%s, s=%s) using the %s regime", start, end, s, self.regime)

    @classmethod
    def from_range(cls, bounds: tuple[float, float], s: float) -> Zipf:
        """Build from a ``(start, end)`` pair."""
        start, end = bounds
        return cls(start, end, s)

    @property
    def regime(self) -> str:
        return "one" if isinstance(self._regime, ZipfOne) else "non-one"

    def sample(self, u: float) -> float:
        """Convert a uniform ``u`` in ``[0, 1)`` to a Zipf variate in ``[start, end]``.

        ``u`` is not range checked: values outside ``[0, 1)`` extrapolate the
        transform. Floating point rounding may also put the result marginally
        below ``start`` or above ``end``.
        """
        return self._regime.sample(u)

    def sample_batch(
        self,
        u_values: ArrayLike,
        output: np.ndarray | MutableSequence[float] | None = None,
    ) -> np.ndarray | MutableSequence[float]:
        """Apply :meth:`sample` element-wise, writing into ``output`` when given."""
        u = np.asarray(u_values, dtype=float)
        values = np.asarray(self._regime.sample(u), dtype=float)
        if output is None:
            return values
        if np.shape(output) != u.shape:
            raise ValueError("Input and output sequences must have the same length.")
        if isinstance(output, np.ndarray):
            output[...] = values
        else:
            output[:] = values.tolist()
        return output

    def cdf(self, x: ArrayLike) -> np.ndarray | float:
        """Cumulative probability of ``x`` (inverse of :meth:`sample`)."""
        return self._regime.cdf(x)

    def pdf(self, x: ArrayLike) -> np.ndarray | float:
        """Probability density at ``x`` within ``[start, end]``."""
        return self._regime.pdf(x)

    def iter(self, *, seed: int | None = None) -> ZipfIterator:
        """Return an infinite iterator over variates (default seed when omitted)."""
        from ..sampling import ZipfIterator

        if seed is None:
            return ZipfIterator(self)
        return ZipfIterator.with_seed(self, seed)

    def with_seed(self, seed: int) -> ZipfIterator:
        return self.iter(seed=seed)

    def with_rng(self, rng: np.random.Generator) -> ZipfIterator:
        from ..sampling import ZipfIterator

        return ZipfIterator(self, rng)

    @staticmethod
    def indices_access(indices: range, s: float, *, seed: int | None = None) -> Iterator[int]:
        """Zipf distributed indices from ``indices``; see :func:`zipfload.sampling.indices_access`."""
        from ..sampling import indices_access

        return indices_access(indices, s, seed=seed)

    @staticmethod
    def array_access(
        offset: int, values: Sequence[T], s: float, *, seed: int | None = None
    ) -> Iterator[T]:
        """Zipf distributed elements of ``values``; see :func:`zipfload.sampling.array_access`."""
        from ..sampling import array_access

        return array_access(offset, values, s, seed=seed)
