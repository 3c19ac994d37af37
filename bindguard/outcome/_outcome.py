from __future__ import annotations

from collections.abc import Callable
from typing import Never, Literal, overload, Any

import attrs
from typing_extensions import TypeIs


@attrs.frozen(repr=False, str=False)
class Success[T]:
    value: T

    def unwrap(self) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Success[R]:
        return Success(func(self.value))

    def map_error(self, func: Callable) -> Success[T]:
        return self

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Failure[E]:
    """Failure variant of an outcome.

    The error can be any object. An absent optional value converts to a failure
    whose error is None.
    """

    error: E

    def unwrap(self) -> Never:
        if not isinstance(self.error, BaseException):
            raise ValueError(f"Can't unwrap a failure holding {self.error!r}")
        raise self.error

    def map(self, func: Callable) -> Failure[E]:
        return self

    def map_error[F](self, func: Callable[[E], F]) -> Failure[F]:
        return Failure(func(self.error))

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Outcome[T, E] = Success[T] | Failure[E]


def is_outcome(value: Any) -> TypeIs[Outcome[Any, Any]]:
    return isinstance(value, (Success, Failure))


def is_success[T](outcome: Outcome[T, Any]) -> TypeIs[Success[T]]:
    return outcome.is_success()


def is_failure[E](outcome: Outcome[Any, E]) -> TypeIs[Failure[E]]:
    return outcome.is_failure()


def is_failure_type[E](outcome: Outcome, error_type: type[E]) -> TypeIs[Failure[E]]:
    return is_failure(outcome) and isinstance(outcome.error, error_type)


@overload
def unwrap[T](outcome: Success[T]) -> T: ...


@overload
def unwrap(outcome: Failure[Any]) -> Never: ...


def unwrap(outcome):
    return outcome.unwrap()
