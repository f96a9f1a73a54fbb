import pandas as pd
import pytest

from zipfload import access_frequencies, array_access, indices_access, take


def test_access_frequencies_orders_by_count() -> None:
    frame = access_frequencies([3, 1, 1, 2, 1, 3])
    assert list(frame.columns) == ["value", "count", "share"]
    assert frame["value"].tolist() == [1, 3, 2]
    assert frame["count"].tolist() == [3, 2, 1]
    assert frame["share"].sum() == pytest.approx(1.0)


def test_access_frequencies_keeps_first_seen_order_on_ties() -> None:
    frame = access_frequencies(["b", "a", "c", "a", "b"])
    assert frame["value"].tolist() == ["b", "a", "c"]


def test_access_frequencies_empty() -> None:
    frame = access_frequencies([])
    assert frame.empty


def test_frequencies_of_skewed_stream() -> None:
    frame = access_frequencies(take(indices_access(range(1, 11), 2.0), 10_000))
    assert frame["count"].sum() == 10_000
    assert frame.loc[0, "value"] == 1
    assert frame.loc[0, "share"] > 0.45


def test_take_validates_count() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        take(indices_access(range(1, 5), 1.0), -1)


def test_access_frequencies_counts_missing_values() -> None:
    draws = take(array_access(1, [None, "x"], 2.0, seed=1), 100)
    frame = access_frequencies(draws)
    assert frame["count"].sum() == 100
    assert len(frame) == 2
    missing = frame[frame["value"].isna()]
    assert missing["count"].tolist() == [draws.count(None)]
    assert frame.loc[0, "value"] is None or pd.isna(frame.loc[0, "value"])
    assert frame["share"].sum() == pytest.approx(1.0)
