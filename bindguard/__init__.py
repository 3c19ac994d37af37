"""Control flow helpers to get a value or get going.

* :func:`bind` extracts the value of anything that can be converted into an outcome,
  or runs an escape action.
* :func:`if_matches` maps the parts of a value that matches a shape.
"""

from ._exceptions import (
    BindguardError,
    FrozenBindingError,
    LockAcquisitionError,
    LockReleasedError,
    ShapeError,
    UnboundNameError,
)
from .binding import (
    Bindings,
    Block,
    EscapeSignal,
    bind,
    block,
    raise_,
    return_,
    supports_early_return,
)
from .outcome import Acquire, Failure, IntoOutcome, Outcome, Success, into_outcome
from .shape import if_matches

__all__ = [
    "Acquire",
    "BindguardError",
    "Bindings",
    "Block",
    "EscapeSignal",
    "Failure",
    "FrozenBindingError",
    "IntoOutcome",
    "LockAcquisitionError",
    "LockReleasedError",
    "Outcome",
    "ShapeError",
    "Success",
    "UnboundNameError",
    "bind",
    "block",
    "if_matches",
    "into_outcome",
    "raise_",
    "return_",
    "supports_early_return",
]
