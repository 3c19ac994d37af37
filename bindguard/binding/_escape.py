"""Escape actions that divert the control flow when a value can't be bound.

An escape action is a callable taking no argument.
If it returns, its value replaces the value that couldn't be bound.
To leave the current scope instead, it raises an :class:`EscapeSignal` that is caught
by the scope it targets:

* :func:`return_` returns from the innermost function decorated with
  :func:`supports_early_return`;
* :meth:`Block.exit` leaves a specific :func:`block`, which gives ``break`` when the
  block surrounds a loop and ``continue`` when it surrounds the loop body;
* :func:`raise_` raises an ordinary exception.

Signals derive from :class:`BaseException`, so that an ``except Exception`` clause
between the escape action and its target doesn't intercept them.
"""

from __future__ import annotations

import contextlib
import functools
import logging
from collections.abc import Callable, Iterator
from typing import Any, Never, ParamSpec, TypeVar

import attrs

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")
_T = TypeVar("_T")


class EscapeSignal(BaseException):
    """Base class for the signals raised by escape actions."""

    pass


class EarlyReturn(EscapeSignal):
    """Signal to return a value from a function decorated with
    :func:`supports_early_return`."""

    def __init__(self, value: Any = None):
        super().__init__(value)
        self.value = value


class BlockExit(EscapeSignal):
    """Signal to leave a specific :class:`Block`."""

    def __init__(self, block: Block, value: Any = None):
        super().__init__(block, value)
        self.block = block
        self.value = value


def return_(value: Any = None) -> Callable[[], Never]:
    """Build an escape action that returns `value` from the enclosing function.

    The enclosing function must be decorated with :func:`supports_early_return`.
    """

    def escape() -> Never:
        raise EarlyReturn(value)

    return escape


def raise_(error: BaseException) -> Callable[[], Never]:
    """Build an escape action that raises `error`."""

    def escape() -> Never:
        raise error

    return escape


def supports_early_return(func: Callable[_P, _T]) -> Callable[_P, Any]:
    """Decorator allowing :func:`return_` to return from the decorated function."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs):
        try:
            return func(*args, **kwargs)
        except EarlyReturn as signal:
            return signal.value

    return wrapper


@attrs.define(eq=False)
class Block:
    """Scope that can be exited early by calling :meth:`exit`.

    Blocks are created with :func:`block`.
    An exit only leaves the block it was called on, even when blocks are nested.

    Attributes:
        name: Optional label used in log messages.
        exited: Whether the block was left by calling :meth:`exit`.
        value: The value passed to :meth:`exit`, None if the block was not exited.
    """

    name: str = ""
    exited: bool = attrs.field(default=False, init=False)
    value: Any = attrs.field(default=None, init=False)

    def exit(self, value: Any = None) -> Never:
        """Leave the block, recording `value`.

        This method can be passed directly as an escape action.
        """

        raise BlockExit(self, value)


@contextlib.contextmanager
def block(name: str = "") -> Iterator[Block]:
    """Open a block that can be left early with :meth:`Block.exit`.

    Example:
        .. code-block:: python

            with block() as loop:
                for item in items:
                    with block() as step:
                        # continues with the next item if there is no value
                        value = bind(item.value, otherwise=step.exit)
                        # stops iterating if there is no limit
                        limit = bind(item.limit, otherwise=loop.exit)
                        ...
    """

    scope = Block(name)
    try:
        yield scope
    except BlockExit as signal:
        if signal.block is not scope:
            raise
        scope.exited = True
        scope.value = signal.value
        logger.debug("Exited block %r", scope.name)
