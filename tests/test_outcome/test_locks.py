import threading

import pytest

from bindguard import LockAcquisitionError, LockReleasedError
from bindguard.outcome import (
    Acquire,
    LockGuard,
    Success,
    into_outcome,
    is_failure_type,
)


def test_lock_conversion_acquires_lock():
    lock = threading.Lock()

    outcome = into_outcome(lock)

    assert isinstance(outcome, Success)
    assert isinstance(outcome.value, LockGuard)
    assert outcome.value.lock is lock
    assert lock.locked()
    outcome.value.release()
    assert not lock.locked()


def test_rlock_conversion_is_reentrant():
    lock = threading.RLock()

    with into_outcome(lock).unwrap(), into_outcome(lock).unwrap():
        pass

    outcome = into_outcome(Acquire(lock, blocking=False))
    assert outcome.is_success()
    outcome.value.release()


def test_non_blocking_attempt_on_held_lock_fails():
    lock = threading.Lock()
    lock.acquire()

    outcome = into_outcome(Acquire(lock, blocking=False))

    assert is_failure_type(outcome, LockAcquisitionError)
    assert "held" in str(outcome.error)
    lock.release()
    assert not lock.locked()


def test_timed_attempt_on_held_lock_fails():
    lock = threading.Lock()
    lock.acquire()

    outcome = into_outcome(Acquire(lock, timeout=0.01))

    assert is_failure_type(outcome, LockAcquisitionError)
    assert "Timed out" in str(outcome.error)
    lock.release()


def test_semaphore_attempt():
    semaphore = threading.Semaphore(1)

    first = into_outcome(Acquire(semaphore))
    second = into_outcome(Acquire(semaphore, blocking=False))

    assert first.is_success()
    assert second.is_failure()
    first.value.release()
    assert into_outcome(Acquire(semaphore, timeout=0.01)).is_success()


def test_guard_releases_on_exit():
    lock = threading.Lock()

    with into_outcome(lock).unwrap() as guard:
        assert lock.locked()
        assert not guard.released

    assert guard.released
    assert not lock.locked()


def test_guard_can_be_released_before_exit():
    lock = threading.Lock()

    with into_outcome(lock).unwrap() as guard:
        guard.release()
        assert not lock.locked()


def test_double_release_is_an_error():
    guard = into_outcome(threading.Lock()).unwrap()
    guard.release()

    with pytest.raises(LockReleasedError):
        guard.release()


def test_timeout_requires_blocking():
    with pytest.raises(ValueError):
        Acquire(threading.Lock(), blocking=False, timeout=1)

    with pytest.raises(ValueError):
        Acquire(threading.Lock(), timeout=-2)
