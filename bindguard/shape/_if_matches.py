from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from ._shape import as_shape


def if_matches[R](
    value: Any,
    shape: Any,
    then: Callable[..., R],
    *,
    when: Optional[Callable[..., bool]] = None,
) -> Optional[R]:
    """Map the parts of a value captured by a shape, if the value matches it.

    Args:
        value: The value to test.
        shape: The shape to test the value against.
            Objects that are not shapes are converted with :func:`as_shape`.
        then: Called with the captured values as keyword arguments if the value
            matches the shape and `when` is true.
            It is called at most once, and only in this case.
        when: Optional guard called with the captured values as keyword arguments if
            the value matches the shape.

    Returns:
        The value returned by `then`, or None if the value doesn't match the shape or
        the guard is false.

    Example:
        .. code-block:: python

            per_bin = if_matches(
                (volume, bins),
                (Present(Capture("v")), Present(Capture("b"))),
                lambda v, b: v / b,
                when=lambda v, b: b != 0,
            )
    """

    captures = as_shape(shape).match(value)
    if captures is None:
        return None
    if when is not None and not when(**captures):
        return None
    return then(**captures)
