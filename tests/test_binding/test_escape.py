import pytest

from bindguard import bind, block, raise_, return_, supports_early_return
from bindguard.binding import BlockExit, EarlyReturn, EscapeSignal


def test_return_without_decorator_raises_signal():
    with pytest.raises(EarlyReturn) as exc_info:
        return_(42)()
    assert exc_info.value.value == 42


def test_early_return_default_value_is_none():
    @supports_early_return
    def f():
        bind(None, otherwise=return_())
        pytest.fail("Should have returned")

    assert f() is None


def test_innermost_function_returns():
    @supports_early_return
    def inner():
        bind(None, otherwise=return_("inner"))

    @supports_early_return
    def outer():
        result = inner()
        return f"outer got {result}"

    assert outer() == "outer got inner"


def test_decorator_preserves_metadata():
    @supports_early_return
    def documented():
        """Documentation."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Documentation."


def test_signals_are_not_caught_by_exception_handlers():
    @supports_early_return
    def f():
        try:
            bind(None, otherwise=return_("escaped"))
        except Exception:
            pytest.fail("Signal was caught")
        return "not escaped"

    assert f() == "escaped"
    assert not issubclass(EscapeSignal, Exception)


def test_block_exit_records_value():
    with block("outer") as outer:
        outer.exit(42)

    assert outer.exited
    assert outer.value == 42


def test_block_without_exit():
    with block() as scope:
        pass

    assert not scope.exited
    assert scope.value is None


def test_nested_block_exits_outer_only():
    steps = []

    with block() as outer:
        with block() as inner:
            steps.append("inner")
            outer.exit()
        steps.append("after inner")

    assert steps == ["inner"]
    assert outer.exited
    assert not inner.exited


def test_exit_outside_block_raises_signal():
    with block() as scope:
        pass

    with pytest.raises(BlockExit):
        scope.exit()


def test_raise_action():
    error = KeyError("missing")

    with pytest.raises(KeyError) as exc_info:
        bind(None, otherwise=raise_(error))
    assert exc_info.value is error
