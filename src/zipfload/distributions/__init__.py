"""Zipf distribution handle and its inverse-CDF regimes."""

from __future__ import annotations

from .regimes import Regime, ZipfNonOne, ZipfOne, select_regime
from .zipf import Zipf

__all__ = [
    "Zipf",
    "Regime",
    "ZipfOne",
    "ZipfNonOne",
    "select_regime",
]
