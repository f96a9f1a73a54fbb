import copy
import pickle

import pytest

from zipfload.errors import (
    EmptyArray,
    InvalidPowerParameter,
    InvalidRangeEnd,
    InvalidRangeStart,
    ZipfError,
)


@pytest.mark.parametrize(
    "error,message",
    [
        (InvalidPowerParameter(-1.5), "Power parameter s must be > 0, got: -1.5"),
        (InvalidRangeStart(0.0), "Range start must be > 0, got: 0.0"),
        (InvalidRangeEnd(5.0, 2.0), "Range end must be > start, got: 5.0..2.0"),
        (EmptyArray(), "Array cannot be empty"),
    ],
)
def test_error_messages(error: ZipfError, message: str) -> None:
    assert str(error) == message
    assert isinstance(error, ZipfError)
    assert isinstance(error, ValueError)


def test_errors_compare_by_value() -> None:
    assert InvalidRangeEnd(1.0, 0.5) == InvalidRangeEnd(1.0, 0.5)
    assert InvalidRangeEnd(1.0, 0.5) != InvalidRangeEnd(1.0, 0.25)
    assert InvalidRangeStart(0.0) != InvalidPowerParameter(0.0)
    assert EmptyArray() == EmptyArray()
    assert len({InvalidPowerParameter(0.0), InvalidPowerParameter(0.0)}) == 1


@pytest.mark.parametrize(
    "error",
    [
        InvalidPowerParameter(0.0),
        InvalidRangeStart(-2.0),
        InvalidRangeEnd(5.0, 2.0),
        EmptyArray(),
    ],
)
def test_errors_survive_copy_and_pickle(error: ZipfError) -> None:
    for clone in (copy.copy(error), copy.deepcopy(error), pickle.loads(pickle.dumps(error))):
        assert type(clone) is type(error)
        assert clone == error
        assert str(clone) == str(error)


def test_errors_keep_inputs_in_args() -> None:
    assert InvalidRangeEnd(5.0, 2.0).args == (5.0, 2.0)
    assert InvalidPowerParameter(-1.0).s == -1.0
    assert EmptyArray().args == ()
