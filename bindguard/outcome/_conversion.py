from __future__ import annotations

import functools
from typing import Any, Protocol, runtime_checkable

import returns.maybe
import returns.result

from ._outcome import Outcome, Success, Failure, is_outcome
from .._exceptions import with_note


@runtime_checkable
class IntoOutcome[T, E](Protocol):
    """Type that knows whether its value is a success or a failure.

    Implementing this protocol lets instances of a type be used as the source of
    :func:`bindguard.bind`.
    The method is called once per conversion and takes over the value: it may have
    side effects, for example acquiring a resource, and it may block.
    It must not raise to signal an invalid state, it must return a
    :class:`Failure` instead.
    """

    def __into_outcome__(self) -> Outcome[T, E]: ...


@functools.singledispatch
def into_outcome(value: Any) -> Outcome[Any, Any]:
    """Represent a value as an outcome.

    Types registered with :func:`into_outcome.register` are converted by their
    registered implementation.
    Objects implementing :class:`IntoOutcome` are converted by their
    ``__into_outcome__`` method.
    Any other value is treated as an optional value: None is a failure holding None,
    everything else is a success holding the value itself.

    Conversion may block or have side effects, depending on the type of the value.
    """

    if isinstance(value, IntoOutcome):
        return _call_protocol(value)
    if value is None:
        return Failure(None)
    return Success(value)


def _call_protocol(value: IntoOutcome) -> Outcome[Any, Any]:
    outcome = value.__into_outcome__()
    if not is_outcome(outcome):
        raise with_note(
            TypeError(f"Expected an outcome, got {outcome!r}"),
            f"Returned by {type(value).__qualname__}.__into_outcome__",
        )
    return outcome


@into_outcome.register(Success)
@into_outcome.register(Failure)
def _(value: Outcome[Any, Any]) -> Outcome[Any, Any]:
    return value


@into_outcome.register(returns.result.Result)
def _(value: returns.result.Result) -> Outcome[Any, Any]:
    match value:
        case returns.result.Success(inner):
            return Success(inner)
        case returns.result.Failure(error):
            return Failure(error)
        case other:
            raise TypeError(f"Unexpected result container {other!r}")


@into_outcome.register(returns.maybe.Maybe)
def _(value: returns.maybe.Maybe) -> Outcome[Any, Any]:
    match value:
        case returns.maybe.Some(inner):
            return Success(inner)
        case _:
            return Failure(None)
