"""Conversion of lock acquisition attempts into outcomes."""

from __future__ import annotations

import logging
import threading
from typing import Protocol, Self

import attrs

from ._conversion import into_outcome
from ._outcome import Outcome, Success, Failure
from .._exceptions import LockAcquisitionError, LockReleasedError

logger = logging.getLogger(__name__)


class Lockable(Protocol):
    def acquire(self, blocking: bool = ..., timeout: float = ...) -> bool: ...

    def release(self) -> None: ...


@attrs.define(eq=False)
class LockGuard[L: Lockable]:
    """Owns a lock that was acquired by converting an :class:`Acquire`.

    The lock stays held until the guard is released, either explicitly with
    :meth:`release` or by using the guard as a context manager.
    """

    lock: L
    _released: bool = attrs.field(default=False, init=False)

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Release the lock owned by this guard.

        Raises:
            LockReleasedError: if the guard was already released.
        """

        if self._released:
            raise LockReleasedError(f"{self.lock!r} was already released")
        self._released = True
        self.lock.release()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._released:
            self.release()


@attrs.frozen
class Acquire[L: Lockable]:
    """A single attempt at acquiring a lock.

    Converting this object into an outcome performs the attempt, so the conversion
    may block, up to `timeout` seconds if a timeout is given.

    Attributes:
        lock: The lock to acquire.
            It must expose ``acquire(blocking, timeout)`` and ``release()`` like the
            locks of the :mod:`threading` module.
        blocking: Whether to wait for the lock to become available.
        timeout: The maximum number of seconds to wait for the lock, or -1 to wait
            indefinitely.
            Must be left to -1 if `blocking` is False.
    """

    lock: L
    blocking: bool = attrs.field(default=True, kw_only=True)
    timeout: float = attrs.field(default=-1, kw_only=True)

    @timeout.validator  # type: ignore
    def _validate_timeout(self, attribute, value):
        if value != -1:
            if not self.blocking:
                raise ValueError("Can't specify a timeout for a non-blocking attempt")
            if value < 0:
                raise ValueError(f"Timeout must be positive or -1, got {value}")

    def __into_outcome__(self) -> Outcome[LockGuard[L], LockAcquisitionError]:
        if self._attempt():
            return Success(LockGuard(self.lock))
        logger.debug("Could not acquire %r", self.lock)
        return Failure(LockAcquisitionError(self._describe_failure()))

    def _attempt(self) -> bool:
        # Semaphores reject -1 as a timeout, so it is only passed when given.
        if self.timeout == -1:
            return self.lock.acquire(self.blocking)
        return self.lock.acquire(self.blocking, self.timeout)

    def _describe_failure(self) -> str:
        if not self.blocking:
            return f"{self.lock!r} is held by another owner"
        return f"Timed out after {self.timeout} s while waiting for {self.lock!r}"


@into_outcome.register(type(threading.Lock()))
@into_outcome.register(type(threading.RLock()))
def _(value: Lockable) -> Outcome[LockGuard, LockAcquisitionError]:
    return Acquire(value).__into_outcome__()
