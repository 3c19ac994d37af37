from __future__ import annotations

import tblib.pickling_support


def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""

    exc.add_note(note)
    return exc


@tblib.pickling_support.install
class BindguardError(Exception):
    """Base class for the errors raised by this library.

    It should not be raised directly, instead raise a subclass.
    """

    pass


@tblib.pickling_support.install
class LockAcquisitionError(BindguardError):
    """Describes a lock that could not be acquired.

    This error is not raised by the lock conversion, it is carried as the payload of
    the failure outcome.
    """

    pass


@tblib.pickling_support.install
class LockReleasedError(BindguardError, RuntimeError):
    """Raised when releasing a lock guard that was already released."""

    pass


@tblib.pickling_support.install
class ShapeError(BindguardError, ValueError):
    """Raised when a shape is constructed with inconsistent captures."""

    pass


@tblib.pickling_support.install
class FrozenBindingError(BindguardError, AttributeError):
    """Raised when assigning to a binding that was not declared mutable."""

    pass


@tblib.pickling_support.install
class UnboundNameError(BindguardError, NameError):
    """Raised when rebinding a name that has no current binding."""

    pass
