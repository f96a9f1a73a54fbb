"""Tabulate drawn samples to inspect workload skew."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from itertools import islice
from typing import TypeVar

import numpy as np
import pandas as pd

T = TypeVar("T")


def take(stream: Iterator[T], n: int) -> list[T]:
    """Return the next ``n`` items of an infinite stream."""
    if n < 0:
        raise ValueError("n must be non-negative.")
    return list(islice(stream, n))


def access_frequencies(samples: Iterable[Hashable]) -> pd.DataFrame:
    """Return a tidy frame of ``value``, ``count`` and ``share`` per distinct sample.

    Missing values such as ``None`` are counted like any other value. Rows are
    ordered by descending count, ties keep the order of first appearance.
    """
    codes, uniques = pd.factorize(pd.Series(list(samples), dtype=object), use_na_sentinel=False)
    counts = np.bincount(codes, minlength=len(uniques)).astype(int)
    frame = pd.DataFrame(
        {"value": pd.Series(list(uniques), dtype=object), "count": pd.Series(counts, dtype=int)}
    )
    total = int(frame["count"].sum())
    frame["share"] = frame["count"] / total if total else 0.0
    return frame.sort_values("count", ascending=False, kind="mergesort", ignore_index=True)


__all__ = ["take", "access_frequencies"]
