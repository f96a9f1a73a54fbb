"""Infinite sampling streams built on top of the Zipf distribution handle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

import numpy as np

from ..distributions import Zipf
from ..errors import EmptyArray

__all__ = [
    "DEFAULT_SEED",
    "ZipfIterator",
    "indices_access",
    "array_access",
]

DEFAULT_SEED = 666

T = TypeVar("T")


class ZipfIterator:
    """Infinite iterator of Zipf variates driven by a seedable uniform source.

    Each ``next()`` pulls one uniform value from ``rng`` and feeds it through
    the handle, so two iterators with the same handle and seed yield identical
    sequences. Instances are not safe to share between threads.

    Examples
    --------
    >>> zipf = Zipf(1.0, 100.0, 1.5)
    >>> a = ZipfIterator.with_seed(zipf, 42).take(5)
    >>> b = zipf.iter(seed=42).take(5)
    >>> a == b
    True
    """

    __slots__ = ("zipf", "rng")

    def __init__(self, zipf: Zipf, rng: np.random.Generator | None = None) -> None:
        self.zipf = zipf
        self.rng = rng if rng is not None else np.random.default_rng(DEFAULT_SEED)

    @classmethod
    def with_seed(cls, zipf: Zipf, seed: int) -> ZipfIterator:
        """Create an iterator whose source is seeded with ``seed``."""
        return cls(zipf, np.random.default_rng(seed))

    def with_rng(self, rng: np.random.Generator) -> ZipfIterator:
        """Return an iterator over the same distribution drawing from ``rng``."""
        return type(self)(self.zipf, rng)

    def __iter__(self) -> ZipfIterator:
        return self

    def __next__(self) -> float:
        return float(self.zipf.sample(self.rng.random()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.zipf!r})"

    def take(self, n: int) -> list[float]:
        """Pull the next ``n`` values."""
        return [next(self) for _ in range(n)]

    def draw(self, size: int) -> np.ndarray:
        """Pull ``size`` values at once; consumes the same uniforms as ``size`` calls to ``next``."""
        return np.asarray(self.zipf.sample_batch(self.rng.random(size)), dtype=float)


def _stream(zipf: Zipf, seed: int | None, rng: np.random.Generator | None) -> ZipfIterator:
    if rng is not None:
        return ZipfIterator(zipf, rng)
    if seed is not None:
        return ZipfIterator.with_seed(zipf, seed)
    return ZipfIterator(zipf)


def _clamped_indices(values: Iterable[float], low: int, high: int) -> Iterator[int]:
    for value in values:
        # int() truncates toward zero; rounding at either bound must stay in range.
        yield min(max(int(value), low), high)


def indices_access(
    indices: range,
    s: float,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> Iterator[int]:
    """Yield indices from ``indices`` whose frequency follows Zipf's law.

    ``indices.start`` is the most frequent index. Construction errors are
    raised here, before the iterator is returned.
    """
    if indices.step != 1:
        raise ValueError("Index ranges must use a step of 1.")
    zipf = Zipf(float(indices.start), float(indices.stop), s)
    return _clamped_indices(_stream(zipf, seed, rng), indices.start, indices.stop - 1)


def array_access(
    offset: int,
    values: Sequence[T],
    s: float,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> Iterator[T]:
    """Yield elements of ``values`` with Zipf distributed frequency.

    ``offset`` places element 0 at ``offset`` on the x-axis, so larger offsets
    flatten the skew. Element 0 is always the most frequent. ``values`` is
    copied, later changes to the caller's sequence are not seen.
    """
    items = tuple(values)
    if not items:
        raise EmptyArray()
    indices = indices_access(range(offset, offset + len(items)), s, seed=seed, rng=rng)
    return (items[index - offset] for index in indices)
