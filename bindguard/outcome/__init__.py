"""Defines the outcome type and how values are converted into outcomes.

An outcome is either a :class:`Success` holding a value, or a :class:`Failure`
holding an error.

Any value can be converted into an outcome with :func:`into_outcome`.
Optional values, outcomes, the containers of the ``returns`` library and locks are
supported out of the box.
Other types participate by implementing the :class:`IntoOutcome` protocol, or by
registering a conversion function.

Example:
    .. code-block:: python

        from bindguard.outcome import Failure, Success, into_outcome

        class NegativeIsError:
            def __init__(self, code: int):
                self.code = code

            def __into_outcome__(self):
                if self.code >= 0:
                    return Success(self.code)
                return Failure(f"error {self.code}")

        assert into_outcome(NegativeIsError(42)) == Success(42)
        assert into_outcome(NegativeIsError(-1)) == Failure("error -1")
"""

from ._conversion import IntoOutcome, into_outcome
from ._locks import Acquire, LockGuard, Lockable
from ._outcome import (
    Failure,
    Outcome,
    Success,
    is_failure,
    is_failure_type,
    is_outcome,
    is_success,
    unwrap,
)

__all__ = [
    "Acquire",
    "Failure",
    "IntoOutcome",
    "LockGuard",
    "Lockable",
    "Outcome",
    "Success",
    "into_outcome",
    "is_failure",
    "is_failure_type",
    "is_outcome",
    "is_success",
    "unwrap",
]
