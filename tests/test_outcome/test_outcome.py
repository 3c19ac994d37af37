import pytest
from hypothesis import given
from hypothesis.strategies import integers, text

from bindguard.outcome import (
    Success,
    Failure,
    is_success,
    is_failure,
    is_failure_type,
    is_outcome,
    unwrap,
)


@given(integers())
def test_success_unwraps_to_its_value(value):
    assert unwrap(Success(value)) == value


def test_failure_unwrap_raises_exception():
    error = KeyError("missing")

    with pytest.raises(KeyError) as exc_info:
        unwrap(Failure(error))
    assert exc_info.value is error


def test_failure_unwrap_refuses_non_exception():
    with pytest.raises(ValueError):
        Failure("error").unwrap()


def test_match_success():
    match Success(42):
        case Success(value):
            assert value == 42
        case Failure():
            pytest.fail("Expected a success")


def test_match_failure():
    match Failure("error"):
        case Success():
            pytest.fail("Expected a failure")
        case Failure(error):
            assert error == "error"


def test_map():
    assert Success(20).map(lambda x: x * 2 + 2) == Success(42)
    assert Failure("error").map(lambda x: x * 2) == Failure("error")


def test_map_error():
    assert Failure(-1).map_error(str) == Failure("-1")
    assert Success(42).map_error(str) == Success(42)


@given(text())
def test_predicates(error):
    failure = Failure(error)

    assert is_failure(failure)
    assert not is_success(failure)
    assert is_success(Success(error))
    assert is_outcome(failure)
    assert not is_outcome(error)


def test_is_failure_type():
    assert is_failure_type(Failure(KeyError()), LookupError)
    assert not is_failure_type(Failure(KeyError()), ValueError)
    assert not is_failure_type(Success(KeyError()), KeyError)


def test_repr():
    assert repr(Success("a")) == "Success('a')"
    assert repr(Failure(None)) == "Failure(None)"
    assert str(Success(42)) == "42"
