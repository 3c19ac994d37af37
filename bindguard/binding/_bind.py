from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Optional

from ..outcome import Success, Failure, into_outcome

logger = logging.getLogger(__name__)


def bind(
    source: Any,
    /,
    otherwise: Callable[[], Any],
    on_failure: Optional[Callable[[Any], object]] = None,
) -> Any:
    """Get the value held by `source`, or run an escape action.

    `source` is converted with :func:`bindguard.outcome.into_outcome`.
    If the conversion is a success, its value is returned and neither `on_failure`
    nor `otherwise` is called.

    If the conversion is a failure, `on_failure` is called with the error, then
    `otherwise` is called and its value is returned.
    `otherwise` is always called after a failure, whatever `on_failure` does, except
    if `on_failure` raises.
    To leave the current scope instead of returning a value, `otherwise` must raise,
    see :func:`return_`, :func:`block` and :func:`raise_`.

    Args:
        source: The value to extract from.
            To test a variable in place, pass the variable itself and assign the
            result to the same name: ``x = bind(x, otherwise=...)``.
        otherwise: Escape action called without argument when there is no value.
        on_failure: Optional handler called with the failure payload before the
            escape action.
            Its return value is ignored.

    Example:
        .. code-block:: python

            @supports_early_return
            def read_config(path):
                text = bind(load(path), on_failure=print, otherwise=return_(DEFAULT))
                ...
    """

    match into_outcome(source):
        case Success(value):
            return value
        case Failure(error):
            logger.debug("No value to bind from %r: %r", type(source).__name__, error)
            if on_failure is not None:
                on_failure(error)
            return otherwise()
        case other:
            raise TypeError(f"Expected an outcome, got {other!r}")
