"""Extract a value or get going.

:func:`bind` returns the value held by its source, or runs an escape action that
usually leaves the current scope.
It is meant for the places where raising an exception is not the desired way out,
for example to skip an item in a loop, to stop a loop, or to return a default value
from a function.

:class:`Bindings` wraps the same operation for named variables, which can be declared
mutable or not, and rebound in place.
"""

from ._bind import bind
from ._bindings import MISSING, Bindings
from ._escape import (
    Block,
    BlockExit,
    EarlyReturn,
    EscapeSignal,
    block,
    raise_,
    return_,
    supports_early_return,
)

__all__ = [
    "Bindings",
    "Block",
    "BlockExit",
    "EarlyReturn",
    "EscapeSignal",
    "MISSING",
    "bind",
    "block",
    "raise_",
    "return_",
    "supports_early_return",
]
